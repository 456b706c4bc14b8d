'''
### Normalizer Module

This module repairs information that a plain bottom-up MusicXML to MusicJSON conversion
would lose, because MusicXML only expresses it through the order of sibling elements.

Classes:
    `PartGroupState`:
        Running set of active part-group numbers while scanning a `<part-list>`.

    `NotePositionState`:
        Running note index and pending direction while scanning a `<measure>`.

Functions:
    `apply_part_groups`:
        Adds the active part-group numbers to every `<score-part>` of a part list.

    `apply_note_positions`:
        Adds `noteBefore` and `noteAfter` positions to every `<direction>` of a measure.

    `normalize`:
        Looks up and runs the rule registered for a tag.

    `unify_arrays`:
        Forces the allow-listed tags of a record into sequences.

Dependencies:
    `Enums`:
        For the tag names the rules are keyed by.

    `Helpers`:
        For the forced-array allow-list.

    `YAMLSerializer`:
        Part-group membership is stored as a `FlowStyleList`.

Intended Usage:
    `XMLParser.parse_element` calls `normalize` and then `unify_arrays` once per element,
    after all of its children are converted. A rule only ever mutates the values of the
    element's direct children, never the element's own record.
'''

import logging
from dataclasses import dataclass, field
from typing import Callable, Final, Optional

from .Enums import *
from .Helpers import FORCE_ARRAYS
from .ObjectModel import ConvertedChild, Record
from .YAMLSerializer import FlowStyleList

logger = logging.getLogger(__name__)

''' Part Groups '''
@dataclass
class PartGroupState:
  ''' Part-group numbers that are started and not yet stopped '''
  active: dict = field(default_factory=dict)

  def start(self, number: str) -> None:
    self.active[number] = True

  def stop(self, number: str) -> None:
    self.active.pop(number, None)

  def assign(self, score_part: Record) -> None:
    for number in self.active:
      score_part.setdefault(XMLTags.PART_GROUP.value, FlowStyleList()).append(number)

def apply_part_groups(children: list[ConvertedChild]) -> None:
  state = PartGroupState()

  for child in children:
    if not child.is_record:
      continue

    if child.tag == XMLTags.PART_GROUP.value:
      number = child.attribute('number')
      if number is None:
        continue

      marker = child.attribute('type')
      if marker == GroupMarkerType.START.value:
        state.start(number)
      elif marker == GroupMarkerType.STOP.value:
        state.stop(number)

    elif child.tag == XMLTags.SCORE_PART.value:
      state.assign(child.value)

''' Note Positions '''
@dataclass
class NotePositionState:
  ''' Zero-based index of the last note seen and the direction waiting for the next one '''
  note_index: int = -1
  pending: Optional[Record] = None

  def note(self) -> None:
    self.note_index += 1

    if self.pending is not None:
      self.pending['noteAfter'] = self.note_index
      self.pending = None

  def direction(self, direction: Optional[Record]) -> None:
    # A direction that collapsed to text still takes the pending place, it just carries no fields
    if direction is not None and self.note_index >= 0:
      direction['noteBefore'] = self.note_index

    # Replaces an unresolved direction, which then never gets a noteAfter
    self.pending = direction

def apply_note_positions(children: list[ConvertedChild]) -> None:
  state = NotePositionState()

  for child in children:
    if child.tag == XMLTags.NOTE.value:
      state.note()
    elif child.tag == XMLTags.DIRECTION.value:
      state.direction(child.value if child.is_record else None)

''' Rule Table '''
NORMALIZATION_RULES : Final[dict[str, Callable[[list[ConvertedChild]], None]]] = {
  XMLTags.PART_LIST.value: apply_part_groups,
  XMLTags.MEASURE.value:   apply_note_positions,
}

def normalize(tag: str, children: list[ConvertedChild]) -> None:
  rule = NORMALIZATION_RULES.get(tag)
  if rule is None:
    return

  logger.debug("Applying %s to <%s> with %d children", rule.__name__, tag, len(children))
  rule(children)

def unify_arrays(record: Record) -> Record:
  ''' Wrap single values of allow-listed keys into one-element lists, not recursive '''
  for key, value in record.items():
    if key in FORCE_ARRAYS and not isinstance(value, list):
      record[key] = [value]

  return record

if __name__ == '__main__':
  pass
