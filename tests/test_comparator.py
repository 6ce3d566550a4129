from pytest import fail
from pericope import Pericope, VerseRef, find_by_code

gen = find_by_code("GEN")

def _p(s):
    return Pericope(s)

def _c(test, a, b, expected):
    res = getattr(_p(a), test)(_p(b))
    if res != expected:
        fail(f"{a} {test} {b} is {res} rather than {expected}")

def test_intersects():
    _c("intersects", "GEN 1:1-5", "GEN 1:5-10", True)
    _c("intersects", "GEN 1:1-5", "GEN 1:6-10", False)
    _c("overlaps", "GEN 1:30-2:2", "GEN 2:1", True)
    _c("intersects", "GEN 1:1-5", "EXO 1:1-5", False)

def test_contains():
    _c("contains", "GEN 1:1-10", "GEN 1:3-5", True)
    _c("contains", "GEN 1:3-5", "GEN 1:1-10", False)
    _c("contains", "GEN 1:1-3,5-7", "GEN 1:3-5", False)
    _c("contains", "GEN 1:30-2:5", "GEN 1:31-2:1", True)
    _c("contains", "GEN 1:1-10", "EXO 1:3", False)

def test_in():
    p = _p("GEN 1:1-10")
    assert _p("GEN 1:3") in p
    assert VerseRef(gen, 1, 3) in p
    assert VerseRef(gen, 1, 11) not in p
    assert VerseRef(find_by_code("EXO"), 1, 3) not in p
    assert "GEN 1:3" not in p

def test_adjacent():
    _c("adjacent_to", "GEN 1:1-5", "GEN 1:6-10", True)
    _c("adjacent_to", "GEN 1:6-10", "GEN 1:1-5", True)
    _c("adjacent_to", "GEN 1:31", "GEN 2:1", True)
    _c("adjacent_to", "GEN 1:1-5", "GEN 1:7", False)
    _c("adjacent_to", "GEN 1:1-5", "GEN 1:5-6", False)
    _c("adjacent_to", "GEN 1:1-5", "EXO 1:6", False)

def test_precedes():
    _c("precedes", "GEN 1:1-5", "GEN 1:6", True)
    _c("precedes", "GEN 1:31", "GEN 2:1", True)
    _c("precedes", "GEN 1:1-5", "GEN 1:5-6", False)
    _c("precedes", "GEN 1:6", "GEN 1:1-5", False)
    _c("precedes", "GEN 1:1", "EXO 2:1", False)

def test_follows():
    _c("follows", "GEN 1:6", "GEN 1:1-5", True)
    _c("follows", "GEN 2:1", "GEN 1:31", True)
    _c("follows", "GEN 1:5-6", "GEN 1:1-5", False)
    _c("follows", "GEN 1:1-5", "GEN 1:6", False)

def test_empty():
    e = Pericope.empty(gen)
    p = _p("GEN 1:1")
    for test in ("intersects", "adjacent_to", "precedes", "follows"):
        if getattr(e, test)(p) or getattr(p, test)(e):
            fail(f"empty pericope {test} GEN 1:1")
