'''
### ObjectModel Module

This module defines the value types of a MusicJSON object tree and the handle used to
pass already converted child values to the normalization rules of their parent.

Types:
    `Scalar`:
        A text value. Produced for an element with no attributes and non-blank text.

    `Record`:
        An ordered mapping of attribute keys (marker-prefixed) and child tag keys.

    `ObjectValue`:
        Either a `Scalar` or a `Record`.

Classes:
    `ConvertedChild`:
        Pairs a direct child's lower-cased tag with its converted value.

Functions:
    `insert_child`:
        Merges a converted child value into a record under its tag key.

Intended Usage:
    The forward conversion builds one `ObjectValue` per element, bottom-up, and hands the
    list of `ConvertedChild` handles to the normalizer. This is the only place a value may
    be mutated after its own element finished converting.
'''

from dataclasses import dataclass
from typing import Union

from .Helpers import attribute_key

# Converted MusicXML text is always str, numbers only appear as noteBefore/noteAfter
# positions or in hand-written MusicJSON fed to the writer
Scalar      = Union[str, int, float]
Record      = dict
ObjectValue = Union[Scalar, Record]


@dataclass
class ConvertedChild:
  ''' A direct child element's tag and its converted value '''
  tag: str
  value: ObjectValue

  @property
  def is_record(self) -> bool:
    return isinstance(self.value, dict)

  def attribute(self, name: str, default=None):
    if not self.is_record:
      return default
    return self.value.get(attribute_key(name), default)


def insert_child(record: Record, key: str, value: ObjectValue) -> None:
  ''' Store value under key, growing into a list on repeated keys '''
  if key not in record:
    record[key] = value
  elif isinstance(record[key], list):
    record[key].append(value)
  else:
    record[key] = [record[key], value]

if __name__ == '__main__':
  pass
