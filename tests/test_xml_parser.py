"""Tests for the MusicXML to MusicJSON conversion."""

import xml.etree.ElementTree as xml

import pytest

from musicjson.XMLParser import parse_element, parse_document


def convert(source):
    return parse_element(xml.fromstring(source))


# ---------------------------------------------------------------------------
# attributes and children
# ---------------------------------------------------------------------------

def test_attributes_are_marker_prefixed():
    assert convert('<part id="P1"/>') == {"$id": "P1"}

def test_attribute_order_is_kept():
    result = convert('<wedge type="crescendo" spread="0" default-y="-70"/>')
    assert list(result) == ["$type", "$spread", "$default-y"]

def test_single_child_is_not_a_list():
    assert convert("<pitch><step>C</step></pitch>") == {"step": "C"}

def test_repeated_children_become_a_list():
    result = convert("<time><beats>3</beats><beats>2</beats><beats>2</beats></time>")
    assert result == {"beats": ["3", "2", "2"]}

def test_attributes_and_children_do_not_collide():
    result = convert('<clef number="1"><number>2</number></clef>')
    assert result == {"$number": "1", "number": "2"}

def test_empty_element_is_empty_record():
    assert convert("<note><chord/></note>") == {"chord": {}}

def test_tags_are_lower_cased():
    result = parse_document(xml.fromstring("<Score-Partwise><Work/></Score-Partwise>"))
    assert result == {"score-partwise": {"work": {}}}

def test_whitespace_text_is_ignored():
    assert convert("<key>\n    <fifths>0</fifths>\n  </key>") == {"fifths": "0"}


# ---------------------------------------------------------------------------
# text content
# ---------------------------------------------------------------------------

def test_text_without_attributes_is_scalar():
    assert convert("<octave>4</octave>") == "4"

def test_text_with_attributes_goes_to_content():
    result = convert('<words font-style="italic">dolce</words>')
    assert result == {"$font-style": "italic", "content": "dolce"}

def test_content_text_is_not_stripped():
    assert convert('<words font-style="italic"> dolce </words>')["content"] == " dolce "

def test_text_discards_children():
    assert convert("<credit><credit-words>a</credit-words>title</credit>") == "title"

def test_last_text_fragment_wins():
    assert convert("<credit>first<br/>second</credit>") == "second"

@pytest.mark.parametrize("source", [
    '<part id="P1"/>',
    '<part id="P1">   </part>',
    '<part id="P1"><measure/></part>',
])
def test_attributes_never_give_a_scalar(source):
    assert isinstance(convert(source), dict)


# ---------------------------------------------------------------------------
# forced arrays
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("tag", ["score-part", "part-group", "part", "measure", "attributes", "note"])
def test_forced_array_tags_are_always_lists(tag):
    result = convert(f"<parent><{tag}/></parent>")
    assert result == {tag: [{}]}

def test_forced_array_of_scalar():
    assert convert("<part-list><score-part>x</score-part></part-list>") == {"score-part": ["x"]}

def test_forced_array_with_many_items():
    result = convert('<part><measure number="1"/><measure number="2"/></part>')
    assert result == {"measure": [{"$number": "1"}, {"$number": "2"}]}


# ---------------------------------------------------------------------------
# documents
# ---------------------------------------------------------------------------

def test_hello_world(helloworld):
    result = parse_document(xml.fromstring(helloworld))
    score = result["score-partwise"]

    assert list(result) == ["score-partwise"]
    assert score["$version"] == "3.0"
    assert score["part-list"] == {"score-part": [{"$id": "P1", "part-name": "Music"}]}

    [part] = score["part"]
    assert part["$id"] == "P1"

    [measure] = part["measure"]
    [attributes] = measure["attributes"]
    assert attributes["time"] == {"beats": "4", "beat-type": "4"}
    assert measure["note"] == [{
        "pitch": {"step": "C", "octave": "4"},
        "duration": "4",
        "type": "whole",
    }]

def test_chord_and_pitch(reve):
    score = parse_document(xml.fromstring(reve))["score-partwise"]
    note = score["part"][1]["measure"][0]["note"][1]

    assert note["chord"] == {}
    assert len(note["chord"]) == 0
    assert note["pitch"]["octave"] == "4"

def test_unicode_text(reve):
    score = parse_document(xml.fromstring(reve))["score-partwise"]
    assert score["work"] == {"work-title": "Rêve"}
