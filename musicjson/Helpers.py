'''
### Helpers Module

This module provides the fixed constants and small helper functions shared by the
forward (MusicXML to MusicJSON) and reverse (MusicJSON to MusicXML) conversions.

Constants:
    `ATTRIBUTE_PREFIX`:
        The marker prefixed to record keys that hold an XML attribute.

    `CONTENT_KEY`:
        The reserved record key holding text content of an element that also has attributes.

    `FORCE_ARRAYS`:
        The tags always represented as a sequence, even when they occur only once.

Functions:
    `attribute_key`:
        Returns the record key for an XML attribute name.

    `is_attribute_key`:
        Checks whether a record key holds an XML attribute.

    `attribute_name`:
        Strips the attribute marker from a record key.

    `is_blank`:
        Checks whether a text fragment is missing or whitespace only.

    `read_text`:
        Reads a whole text file.

Dependencies:
    `typing`:
        `Final` is used to mark the constants as fixed.

Intended Usage:
    This module is intended to be imported by every conversion module so the
    reserved keys and the forced-array allow-list are defined in exactly one place.
'''

from pathlib import Path
from typing import Final

from .Enums import XMLTags

ATTRIBUTE_PREFIX : Final = '$'
CONTENT_KEY      : Final = 'content'

FORCE_ARRAYS : Final = frozenset(tag.value for tag in (
  XMLTags.SCORE_PART,
  XMLTags.PART_GROUP,
  XMLTags.PART,
  XMLTags.MEASURE,
  XMLTags.ATTRIBUTES,
  XMLTags.NOTE
))

# <?xml ... ?> header of every written document
XML_VERSION    : Final = '1.0'
XML_ENCODING   : Final = 'UTF-8'
XML_STANDALONE : Final = 'no'

''' Helper Functions '''
def attribute_key(name: str) -> str:
  return ATTRIBUTE_PREFIX + name

def is_attribute_key(key: str) -> bool:
  return key.startswith(ATTRIBUTE_PREFIX)

def attribute_name(key: str) -> str:
  return key[len(ATTRIBUTE_PREFIX):]

def is_blank(text) -> bool:
  return text is None or text.strip() == ''

def read_text(path: Path, encoding: str = 'utf-8') -> str:
  if not path.exists():
    raise FileNotFoundError(f"File not found: {path}")

  with open(path, 'r', encoding=encoding) as f:
    return f.read()

if __name__ == '__main__':
  pass
