'''
### XMLWriter Module

This module converts MusicJSON object trees back into MusicXML element trees and
assembles them into complete part-wise MusicXML documents.

Functions:
    `dict_to_xml`:
        Converts an object value into an element with the given tag.

    `create_xml_document`:
        Serializes a MusicJSON object into a MusicXML string with the XML header and DOCTYPE.

Dependencies:
    `xml.etree.ElementTree`:
        For building and serializing the element tree.

Intended Usage:
    This module is the backend of `MusicJSON.to_music_xml`. Only the part-wise document
    variant is written, the time-wise variant is not supported.
'''

import logging
import xml.etree.ElementTree as xml

from .Enums import DocumentType
from .Helpers import *
from .ObjectModel import ObjectValue

logger = logging.getLogger(__name__)

''' XML Writing Functions '''
def dict_to_xml(tag: str, d: ObjectValue, parent: xml.Element = None) -> xml.Element:
    ''' Convert nested dictionary to XML '''
    element = xml.Element(tag)

    if isinstance(d, dict):
      for key, value in d.items():
        # Marker-prefixed keys are attributes of this element
        if is_attribute_key(key):
          element.set(attribute_name(key), str(value))

        # Create multiple separate elements for each list entry
        elif isinstance(value, list):
          for item in value:
            dict_to_xml(key, item, element)

        else:
          dict_to_xml(key, value, element)

    else:
      # If it's a string or a number, just add it as the text content
      element.text = str(d)

    if parent is not None:
      parent.append(element)

    return element

def xml_header() -> str:
  return f'<?xml version="{XML_VERSION}" encoding="{XML_ENCODING}" standalone="{XML_STANDALONE}"?>'

def xml_doctype(document_type: DocumentType = DocumentType.PARTWISE) -> str:
  return f'<!DOCTYPE {document_type.root_tag} PUBLIC "{document_type.public_id}" "{document_type.system_url}">'

def create_xml_document(music_json: dict, pretty: bool = False) -> str:
  ''' Build a part-wise MusicXML document '''
  document_type = DocumentType.PARTWISE

  if not isinstance(music_json, dict) or document_type.root_tag not in music_json:
    raise ValueError(f"MusicJSON object has no '{document_type.root_tag}' root")

  logger.debug("Writing <%s> document", document_type.root_tag)
  root = dict_to_xml(document_type.root_tag, music_json[document_type.root_tag])

  if pretty:
    xml.indent(root)

  return '\n'.join([
    xml_header(),
    xml_doctype(document_type),
    xml.tostring(root, encoding='unicode')
  ])

if __name__ == '__main__':
  pass
