import pytest
from pericope import Pericope
from pericope.errors import (PericopeError, ParseError, InvalidBookError, InvalidChapterError,
                             InvalidVerseError, InvalidRangeError)

def test_messages():
    assert str(InvalidBookError("XYZ")) == "Invalid book: 'XYZ'"
    assert str(InvalidChapterError("GEN", 51)) == "Invalid chapter 51 for book GEN"
    assert str(InvalidVerseError("GEN", 1, 32)) == "Invalid verse 1:32 for book GEN"
    assert str(InvalidRangeError("5-3")) == "Invalid range: '5-3'"
    assert str(ParseError("1:1")) == "Failed to parse: '1:1'"
    assert str(ParseError("1:1", "no book found")) == "Failed to parse: '1:1' - no book found"

def test_hierarchy():
    for e in (InvalidBookError, InvalidChapterError, InvalidVerseError, InvalidRangeError, ParseError):
        assert issubclass(e, PericopeError)
    for e in (InvalidChapterError, InvalidVerseError, InvalidRangeError, ParseError):
        assert issubclass(e, ValueError)

def test_attributes():
    with pytest.raises(InvalidVerseError) as e:
        Pericope("GEN 1:32", strict=True)
    assert (e.value.book, e.value.chapter, e.value.verse) == ("GEN", 1, 32)
    with pytest.raises(InvalidRangeError) as e:
        Pericope("GEN 1:5-3")
    assert e.value.range_text == "1:5-3"

def test_catch_all():
    for s in ("", "INVALID 1:1", "GEN 1:5-3"):
        with pytest.raises(PericopeError):
            Pericope(s)
