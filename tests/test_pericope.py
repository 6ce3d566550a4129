import json
import pytest
from pytest import fail
from pericope import Pericope, PericopeJSONEncoder, VerseRef, Range, Environment, find_by_code
from pericope.errors import ParseError

gen = find_by_code("GEN")

def _f(s, fmt, expected):
    res = Pericope(s).to_string(fmt)
    if res != expected:
        fail(f"{s} as {fmt} is '{res}' rather than '{expected}'")

def test_formats():
    _f("GEN 1:1-3", "canonical", "GEN 1:1-3")
    _f("GEN 1:1-3", "full_name", "Genesis 1:1-3")
    _f("1CO 13:4-7", "full_name", "1 Corinthians 13:4-7")
    _f("Genesis 1:1-3", "abbreviated", "GEN 1:1-3")
    _f("GEN 1:1-3", "unknown", "GEN 1:1-3")

def test_environment():
    env = Environment(cvsep=".", rangesep="; ")
    assert Pericope("GEN 1:1-3,2:5").str(env) == "GEN 1.1-3; 2.5"
    env2 = env.copy(booklabel="name")
    assert env2.cvsep == "."
    assert Pericope("GEN 1:1").str(env2) == "Genesis 1.1"

def test_repr():
    p = Pericope("GEN 1:1-3")
    assert repr(p) == "Pericope('GEN 1:1-3')"
    assert str(Pericope.empty(gen)) == ""
    assert Pericope.empty(gen).to_string("full_name") == ""

def test_constructors():
    p = Pericope(book=gen, ranges=[Range(1, 1, 1, 3)])
    assert p == Pericope("GEN 1:1-3")
    assert Pericope.from_ranges(gen, [Range(1, 1, 1, 3)]) == p
    assert Pericope("Genesis 1:1-3") == p
    assert len({p, Pericope("GEN 1:1-3"), Pericope("GEN 1:1-2")}) == 2
    assert p != "GEN 1:1-3"

def test_versification_kept():
    p = Pericope("GEN 1:1", versification="eng")
    assert p.versification == "eng"
    assert p.union(Pericope("GEN 1:2")).versification == "eng"

def test_counts():
    p = Pericope("GEN 2:1,1:30-31")
    assert len(p) == 3
    assert p.verse_count() == 3
    assert p.range_count() == 2
    assert p.chapter_list() == [1, 2]
    assert p.chapter_count() == 2
    assert list(p) == p.to_a() == p.verse_list()

def test_first_last():
    p = Pericope("GEN 1:5,1:1-3")
    assert p.first_verse() == VerseRef(gen, 1, 1)
    assert p.last_verse() == VerseRef(gen, 1, 5)
    e = Pericope.empty(gen)
    assert e.first_verse() is None and e.last_verse() is None

def test_predicates():
    assert Pericope("GEN 1:1").is_single_verse()
    assert not Pericope("GEN 1:1-2").is_single_verse()
    assert not Pericope("GEN 1:1,1:1").is_single_verse()
    assert Pericope("GEN 1:1-5,7").is_single_chapter()
    assert not Pericope("GEN 1:31-2:1").is_single_chapter()
    assert Pericope("GEN 1:31-2:1").spans_chapters()
    assert not Pericope("GEN 1:1,2:1").spans_chapters()
    assert not Pericope("GEN 1:1").spans_books()
    assert Pericope.empty(gen).is_empty()
    assert not Pericope("GEN 1:1").is_empty()

def test_validity():
    assert Pericope("GEN 1:1-50:26").is_valid()
    assert not Pericope("GEN 1:1-50:27").is_valid()
    assert not Pericope.empty(gen).is_valid()
    with pytest.raises(ParseError):
        Pericope.empty(gen).validate()
    p = Pericope("GEN 1:1")
    assert p.validate() is p

def test_json():
    res = json.dumps({"p": Pericope("GEN 1:1-3"), "v": VerseRef(gen, 1, 2), "r": Range(1, 1, 1, 3)},
                     cls=PericopeJSONEncoder)
    assert res == '{"p": "GEN 1:1-3", "v": "GEN 1:2", "r": "1:1-3"}'
    assert json.dumps({"s": {"b", "a"}}, cls=PericopeJSONEncoder) == '{"s": ["a", "b"]}'
    with pytest.raises(TypeError):
        json.dumps(object(), cls=PericopeJSONEncoder)
