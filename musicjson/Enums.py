'''
### Enums Module

This module defines enumerations used throughout the project to classify and interpret
the MusicXML tags and attribute values that the MusicJSON conversion treats specially.

Classes:
    `XMLTags`:
        An enumeration of MusicXML element tags with special meaning to the converter.
        These are used to dispatch normalization rules and to force sequences.

    `GroupMarkerType`:
        Enumerates the `type` attribute values of a `<part-group>` element.

    `DocumentType`:
        Enumerates the MusicXML document variants and their DOCTYPE identifiers.

Functionality:
    - Provides strongly typed constants for use in conversion and normalization logic.
    - Improves readability and reduces the likelihood of errors from magic strings.

Dependencies:
    `enum`:
        Used for defining enumeration types.

Intended Usage:
    This module should be imported wherever tag identification or document type
    information is needed during MusicXML parsing or MusicXML writing.
'''

from enum import *


class XMLTags(Enum):
  SCORE_PARTWISE = 'score-partwise'
  PART_LIST      = 'part-list'
  PART_GROUP     = 'part-group'
  SCORE_PART     = 'score-part'
  PART           = 'part'
  MEASURE        = 'measure'
  ATTRIBUTES     = 'attributes'
  NOTE           = 'note'
  DIRECTION      = 'direction'


class GroupMarkerType(Enum):
  START = 'start'
  STOP  = 'stop'


class DocumentType(Enum):
  # (root tag, public id, system url)
  PARTWISE = (
    'score-partwise',
    '-//Recordare//DTD MusicXML 2.0 Partwise//EN',
    'http://www.musicxml.org/dtds/partwise.dtd'
  )

  @property
  def root_tag(self) -> str:
    return self.value[0]

  @property
  def public_id(self) -> str:
    return self.value[1]

  @property
  def system_url(self) -> str:
    return self.value[2]


if __name__ == '__main__':
    pass
