import re, logging
from typing import List, Optional, Tuple
from pericope.books import find_by_name
from pericope.reference import Range
from pericope.errors import PericopeError, ParseError, InvalidBookError, InvalidRangeError

logger = logging.getLogger(__name__)

_reword = re.compile(r"^[^\W\d_]+\.?$")
_reletter = re.compile(r"[^\W\d_]")
_reverse = re.compile(r"^(?:(?P<chap>\d+)\s*:\s*)?(?P<num>\d+)$")
_redashes = re.compile("[\u2010-\u2015\u2212]")

_regexes = {
    "book": r"(?:[1-3][a-z][a-z]|[a-z][a-z][a-z])",
    "ranges": r"(?:\d+(?:[:,-]\d+)*)",
    "scan": r"\b(?P<book>{book})\s+(?P<ranges>{ranges})(?![\w:])"
}

regexes = _regexes
for i in range(2):
    regexes = {k: v.format(**regexes) for k, v in regexes.items()}

_rescan = re.compile(regexes["scan"], flags=re.I)


def parse_reference(s: str, versification=None, strict: bool = False) -> Tuple[object, List[Range]]:
    """ Parses a reference like "GEN 1:1-3,5" into a book and list of Ranges.
        strict checks every chapter and verse lies inside the book """
    if s is None or not s.strip():
        raise ParseError(s, "empty reference")
    words = s.split()
    n = 1
    while n < len(words) and _reword.match(words[n]):
        n += 1
    book = None
    for k in range(n, 0, -1):
        book = find_by_name(" ".join(words[:k]))
        if book is not None:
            break
    if book is None:
        if n == 1 and not _reletter.search(words[0]):
            raise ParseError(s, "no book found")
        raise InvalidBookError(" ".join(words[:n]))
    rest = " ".join(words[k:]) or "1:1"
    ranges = parse_ranges(rest)
    if strict:
        for r in ranges:
            r.validate(book)
    return (book, ranges)


def _parseverse(s: str, rtext: str) -> Tuple[Optional[int], int]:
    m = _reverse.match(s.strip())
    if m is None:
        raise InvalidRangeError(rtext)
    chap = int(m.group("chap")) if m.group("chap") is not None else None
    num = int(m.group("num"))
    if chap == 0 or num == 0:
        raise InvalidRangeError(rtext)
    return (chap, num)


def parse_ranges(s: str) -> List[Range]:
    """ Parses a comma separated list of ranges. A bare number is a verse in
        the last chapter given, or a chapter (at verse 1) if there is none yet.
        A bare number ending a range is in the chapter of its start. """
    res = []
    chapter = None
    for part in _redashes.sub("-", s).split(","):
        rtext = part.strip()
        if not rtext:
            raise InvalidRangeError(s)
        b = rtext.split("-")
        if len(b) > 2:
            raise InvalidRangeError(rtext)
        c, v = _parseverse(b[0], rtext)
        if c is not None:
            start = (c, v)
        elif chapter is None:
            start = (v, 1)
        else:
            start = (chapter, v)
        chapter = start[0]
        if len(b) == 1:
            end = start
        else:
            c, v = _parseverse(b[1], rtext)
            if c is not None:
                end = (c, v)
                chapter = c
            else:
                end = (start[0], v)
        if end < start:
            raise InvalidRangeError(rtext)
        res.append(Range(*start, *end))
    return res


def _finditer(text: str, factory, versification=None):
    for m in _rescan.finditer(text):
        try:
            res = factory(m.group("book") + " " + m.group("ranges"), versification=versification)
        except PericopeError as e:
            logger.debug(f"Skipping '{m.group(0)}': {e}")
            continue
        yield (m, res)


def scan(text: str, versification=None, factory=None) -> list:
    """ Returns a Pericope for every reference found in text """
    if factory is None:
        from pericope.pericope import Pericope
        factory = Pericope
    if not text:
        return []
    return [p for m, p in _finditer(text, factory, versification=versification)]


def split(text: str, versification=None, factory=None) -> list:
    """ Cuts text at each reference found in it. Returns a list of strings and
        Pericopes in document order """
    if factory is None:
        from pericope.pericope import Pericope
        factory = Pericope
    if not text:
        return [text]
    res = []
    start = 0
    for m, p in _finditer(text, factory, versification=versification):
        if m.start() > start:
            res.append(text[start:m.start()])
        res.append(p)
        start = m.end()
    if not res:
        return [text]
    if start < len(text):
        res.append(text[start:])
    return res
