'''
### MusicJSON Module

This module provides the public entry points for converting between MusicXML documents
and MusicJSON object trees, in memory and on disk.

Functions:
    `to_music_json`:
        Parses a MusicXML string and returns its MusicJSON object.

    `to_music_xml`:
        Serializes a MusicJSON object into a part-wise MusicXML string.

    `music_json`:
        Callback form of `to_music_json`, called as `callback(error, result)`.

    `music_xml`:
        Callback form of `to_music_xml`, called as `callback(error, result)`.

    `load_music_xml`, `load_music_json`:
        Read a MusicXML file, or a MusicJSON file in JSON or YAML format.

    `dump_json`, `save_music_json`, `save_music_xml`:
        Serialize and write conversion results.

Dependencies:
    `xml.etree.ElementTree`:
        Parses MusicXML text into element trees.

    `json`, `yaml`:
        Read and write MusicJSON documents.

Intended Usage:
    The callback functions invoke their callback exactly once before returning. Parser
    errors are passed to the callback unchanged and never interpreted by the converter.
'''

import json
import logging
import xml.etree.ElementTree as xml
from pathlib import Path
from typing import Callable, Final, Optional

import yaml

from .Helpers import *
from .XMLParser import parse_document
from .XMLWriter import create_xml_document
from .YAMLSerializer import dump_yaml

logger = logging.getLogger(__name__)

Callback = Callable[[Optional[Exception], object], None]

XML_SUFFIXES  : Final = ('.xml', '.musicxml')
JSON_SUFFIXES : Final = ('.json',)
YAML_SUFFIXES : Final = ('.yaml', '.yml')

''' Conversion Functions '''
def to_music_json(source: str) -> dict:
  root = xml.fromstring(source)
  return parse_document(root)

def to_music_xml(source: dict, pretty: bool = False) -> str:
  return create_xml_document(source, pretty)

def music_json(source: str, callback: Callback) -> None:
  ''' Converts MusicXML to MusicJSON '''
  try:
    result = to_music_json(source)
  except xml.ParseError as e:
    logger.debug("MusicXML parsing failed: %s", e)
    callback(e, None)
    return

  callback(None, result)

def music_xml(source: dict, callback: Callback, pretty: bool = False) -> None:
  ''' Converts MusicJSON to MusicXML '''
  try:
    result = to_music_xml(source, pretty)
  except ValueError as e:
    logger.debug("MusicXML writing failed: %s", e)
    callback(e, None)
    return

  callback(None, result)

''' File Functions '''
def load_music_xml(path: Path) -> dict:
  ''' Read a MusicXML file and convert it to MusicJSON '''
  path = Path(path)
  if path.suffix.lower() not in XML_SUFFIXES:
    raise ValueError(f"Unsupported file type: {path.suffix}")

  logger.debug("Reading MusicXML from %s", path)
  # Parsed from bytes so the encoding of the XML declaration is honoured
  tree = xml.parse(path)
  return parse_document(tree.getroot())

def load_music_json(path: Path) -> dict:
  ''' Read a MusicJSON file stored as JSON or YAML '''
  path = Path(path)
  suffix = path.suffix.lower()

  if suffix in JSON_SUFFIXES:
    logger.debug("Reading MusicJSON from %s", path)
    return json.loads(read_text(path))
  elif suffix in YAML_SUFFIXES:
    logger.debug("Reading MusicJSON (YAML) from %s", path)
    return yaml.safe_load(read_text(path))
  else:
    raise ValueError(f"Unsupported file type: {path.suffix}")

def dump_json(obj: dict, indent: Optional[int] = 2) -> str:
  return json.dumps(obj, indent=indent, ensure_ascii=False)

def save_music_json(obj: dict, path: Path, fmt: str = 'json', indent: Optional[int] = 2) -> Path:
  path = Path(path)

  if fmt == 'json':
    text = dump_json(obj, indent)
  elif fmt == 'yaml':
    text = dump_yaml(obj)
  else:
    raise ValueError(f"Unsupported output format: {fmt}")

  with open(path, 'w', encoding='utf-8') as f:
    f.write(text)

  logger.debug("Wrote MusicJSON (%s) to %s", fmt, path)
  return path

def save_music_xml(obj: dict, path: Path, pretty: bool = False) -> Path:
  path = Path(path)

  with open(path, 'w', encoding='utf-8') as f:
    f.write(to_music_xml(obj, pretty))

  logger.debug("Wrote MusicXML to %s", path)
  return path

if __name__ == '__main__':
  pass
