""" Set operations on Pericopes.

Every operation expands its operands into explicit verses, combines them as
sets of VerseRefs and regroups the result into the fewest ranges with
rebuild(). Results are new Pericopes of the same class as the first operand. """

from typing import Iterable, List
from pericope.reference import Range, VerseRef


def same_book(a, b) -> bool:
    """ Precondition of every binary operation """
    return a is not None and b is not None and a.book == b.book

def materialize(pericope) -> List[VerseRef]:
    """ Returns every verse of every range, ranges taken in stored order """
    res = []
    for r in pericope.ranges:
        res.extend(r.verses(pericope.book))
    return res

def rebuild(verses: Iterable[VerseRef]) -> List[Range]:
    """ Groups sorted, unique verses into maximal contiguous ranges """
    res = []
    first = last = None
    for v in verses:
        if first is None:
            first = last = v
        elif last.nextverse() == v:
            last = v
        else:
            res.append(Range.fromRefs(first, last))
            first = last = v
    if first is not None:
        res.append(Range.fromRefs(first, last))
    return res

def bookverses(book) -> List[VerseRef]:
    return [VerseRef(book, c, v) for c in range(1, book.chapter_count + 1)
                                 for v in range(1, book.chapter_length(c) + 1)]

def empty(pericope):
    return pericope.__class__.from_ranges(pericope.book, [], versification=pericope.versification)

def _fromverses(pericope, verses):
    if not verses:
        return empty(pericope)
    return pericope.__class__.from_ranges(pericope.book, rebuild(sorted(verses)),
                                          versification=pericope.versification)


def union(a, b):
    if not same_book(a, b):
        return a
    return _fromverses(a, set(materialize(a)) | set(materialize(b)))

def intersection(a, b):
    if not same_book(a, b):
        return empty(a)
    return _fromverses(a, set(materialize(a)) & set(materialize(b)))

def subtract(a, b):
    if not same_book(a, b):
        return a
    return _fromverses(a, set(materialize(a)) - set(materialize(b)))

def complement(a, scope=None):
    """ Returns the verses of scope not in a. Without a scope of the same
        book, the scope is the whole book """
    if scope is not None and same_book(a, scope):
        scopeverses = set(materialize(scope))
    else:
        scopeverses = set(bookverses(a.book))
    return _fromverses(a, scopeverses - set(materialize(a)))

def normalize(a):
    if not a.ranges:
        return a
    return _fromverses(a, set(materialize(a)))

def expand(a, before: int = 0, after: int = 0):
    """ Adds up to before verses ahead of a and up to after verses after it,
        stopping at the ends of the book. No change returns a itself. """
    if not before and not after:
        return a
    verses = set(materialize(a))
    r = a.first_verse()
    for i in range(max(before, 0)):
        r = r.prevverse() if r is not None else None
        if r is None:
            break
        verses.add(r)
    r = a.last_verse()
    for i in range(max(after, 0)):
        r = r.nextverse() if r is not None else None
        if r is None:
            break
        verses.add(r)
    return _fromverses(a, verses)

def contract(a, fromstart: int = 0, fromend: int = 0):
    """ Drops the first fromstart and last fromend verses of a. Repeated verses
        are collapsed first, so each counts once. No change returns a itself """
    if not fromstart and not fromend:
        return a
    fromstart = max(fromstart, 0)
    fromend = max(fromend, 0)
    verses = sorted(set(materialize(a)))
    if len(verses) <= fromstart + fromend:
        return empty(a)
    return _fromverses(a, verses[fromstart:len(verses) - fromend])
