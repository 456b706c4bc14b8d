'''
### XMLParser Module

This module converts MusicXML element trees into MusicJSON object trees. Every element is
converted into either a record (a dictionary) or a scalar (its text), bottom-up, and the
per-tag normalization rules run as soon as an element's children are converted.

Functions:
    `parse_element`:
        Converts a single element and its subtree into an object value.

    `parse_document`:
        Converts a document root into a MusicJSON object keyed by the root tag.

Conversion Rules:
    - Attributes are stored under `$`-prefixed keys, in document order.
    - Child elements are stored under their lower-cased tag. A repeated tag becomes a list.
    - Non-blank text replaces the whole value when the element has no attributes,
      otherwise it is stored under the `content` key.
    - Tags listed in `Helpers.FORCE_ARRAYS` are always lists.

Dependencies:
    `xml.etree.ElementTree`:
        Provides the element trees handed to this module.

    `Normalizer`:
        For the part-group and note-position rules and the forced arrays.

Intended Usage:
    This module is the backend of `MusicJSON.to_music_json`. Parsing the markup itself is
    left to `xml.etree.ElementTree`, this module only walks the resulting tree.
'''

import logging
import xml.etree.ElementTree as xml

from .Helpers import *
from .Normalizer import normalize, unify_arrays
from .ObjectModel import ConvertedChild, ObjectValue, insert_child

logger = logging.getLogger(__name__)

def _element_tag(element: xml.Element) -> str:
  return element.tag.lower()

def parse_element(element: xml.Element) -> ObjectValue:
  record = {}
  text = None

  for name, value in element.attrib.items():
    record[attribute_key(name)] = value

  # Text before the first child, then each child followed by its tail text
  fragments = [(None, element.text)]
  fragments.extend((child, child.tail) for child in element)

  children: list[ConvertedChild] = []
  for child, fragment in fragments:
    if child is not None:
      converted = ConvertedChild(_element_tag(child), parse_element(child))
      children.append(converted)
      insert_child(record, converted.tag, converted.value)

    if is_blank(fragment):
      continue

    if element.attrib:
      record[CONTENT_KEY] = fragment
    else:
      text = fragment

  normalize(_element_tag(element), children)
  unify_arrays(record)

  # Text of an element without attributes wins over everything built from its children
  if text is not None:
    return text

  return record

def parse_document(root: xml.Element) -> dict:
  tag = _element_tag(root)
  logger.debug("Converting <%s> document", tag)

  return {tag: parse_element(root)}

if __name__ == '__main__':
  pass
