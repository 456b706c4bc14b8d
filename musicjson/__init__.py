'''
### MusicJSON Package

This package converts structured music scores between MusicXML and MusicJSON, a nested
dictionary representation that can be stored as JSON or YAML.

Modules:
    `Enums`:
        Defines the MusicXML tags and document types the converter treats specially.

    `Helpers`:
        Provides the reserved keys, the forced-array allow-list and small helper functions.

    `ObjectModel`:
        Defines the MusicJSON value types and the child handles used by the normalizer.

    `XMLParser`:
        Implements the MusicXML to MusicJSON conversion.

    `Normalizer`:
        Implements the part-group and note-position rules and the forced arrays.

    `XMLWriter`:
        Implements the MusicJSON to MusicXML conversion and document assembly.

    `YAMLSerializer`:
        Provides the PyYAML representers for MusicJSON output.

    `MusicJSON`:
        Public conversion entry points and file helpers.

Functionality:
    - Convert MusicXML to MusicJSON (`music_json`, `to_music_json`).
    - Convert MusicJSON to part-wise MusicXML (`music_xml`, `to_music_xml`).
    - Add part-group membership to score parts and note positions to directions.
    - Read and write MusicXML, JSON and YAML files.

Dependencies:
    `xml.etree.ElementTree`:
        For XML parsing and serialization.

    `yaml`:
        For YAML input and output.
'''

from .MusicJSON import (
  music_json,
  music_xml,
  to_music_json,
  to_music_xml,
  load_music_xml,
  load_music_json,
  save_music_json,
  save_music_xml,
)

__version__ = '2026.10.19'
