import pytest
from pytest import fail
from pericope import Pericope, scan, split

class MyPericope(Pericope):
    pass

def _s(text, *expected):
    res = [str(p) for p in Pericope.parse(text)]
    if res != list(expected):
        fail(f"Scanning '{text}' found {res} rather than {list(expected)}")

def test_scan():
    _s("See GEN 1:1 and MAT 5:3-12 for examples", "GEN 1:1", "MAT 5:3-12")

def test_scan_punctuation():
    _s("1CO 13:4-7, JHN 3:16.", "1CO 13:4-7", "JHN 3:16")
    _s("(ROM 8:28-30; ROM 12:1,2)", "ROM 8:28-30", "ROM 12:1,12:2")

def test_scan_case():
    _s("read gen 1:1 aloud", "GEN 1:1")

def test_scan_nothing():
    _s("Nothing to see here")
    _s("")
    assert scan(None) == []

def test_scan_skips_bad():
    _s("See GEN 1:1 and XYZ 1:1", "GEN 1:1")
    _s("GEN 1:5-3 is backwards")

def test_scan_factory():
    res = MyPericope.parse("GEN 1:1")
    assert len(res) == 1 and type(res[0]) is MyPericope
    assert scan("GEN 1:1", factory=MyPericope)[0] == Pericope("GEN 1:1")

def test_split():
    res = split("Read GEN 1:1 today")
    assert res == ["Read ", Pericope("GEN 1:1"), " today"]

def test_split_edges():
    assert Pericope.split("GEN 1:1") == [Pericope("GEN 1:1")]
    assert Pericope.split("GEN 1:1 and EXO 2:3") == [Pericope("GEN 1:1"), " and ", Pericope("EXO 2:3")]
    assert split("no references") == ["no references"]
    assert split("") == [""]

def test_split_rejoins():
    text = "Compare JHN 3:16 with ROM 5:8 and 1JN 4:9-10."
    res = split(text)
    assert "".join(s if isinstance(s, str) else str(s) for s in res) == text
