import json
from typing import Optional, List, Dict, Iterable
from pericope.reference import Range, VerseRef, Environment, getenvironment
from pericope.parser import parse_reference, scan, split
from pericope.errors import ParseError
from pericope import algebra, analytics, comparator


class Pericope:
    """ A selection of verses from one book, held as a list of Ranges.

        Pericope("GEN 1:1-3,5") parses a reference. Pericope(book=b, ranges=[...])
        takes already built ranges as they are. The ranges of a parsed
        reference keep the order and overlaps they were written with; results
        of the set operations are sorted and maximally merged. A Pericope with
        no ranges is the empty pericope. """

    def __init__(self, s: Optional[str] = None, versification=None, strict: bool = False,
                    book=None, ranges: Optional[Iterable[Range]] = None):
        self.versification = versification
        if s is not None or book is None:
            book, ranges = parse_reference(s, versification=versification, strict=strict)
        self.book = book
        self.ranges = tuple(ranges or ())

    @classmethod
    def from_ranges(cls, book, ranges: Iterable[Range], versification=None) -> "Pericope":
        return cls(book=book, ranges=ranges, versification=versification)

    @classmethod
    def empty(cls, book, versification=None) -> "Pericope":
        return cls(book=book, ranges=(), versification=versification)

    @classmethod
    def parse(cls, text: str, versification=None) -> List["Pericope"]:
        """ Returns every reference found in text """
        return scan(text, versification=versification, factory=cls)

    @classmethod
    def split(cls, text: str, versification=None) -> list:
        return split(text, versification=versification, factory=cls)

    def __str__(self):
        return self.str()

    def __repr__(self):
        return "Pericope('"+self.str()+"')"

    def str(self, env: Optional[Environment] = None) -> str:
        if not self.ranges:
            return ""
        env = getenvironment(env or "canonical")
        return env.localbook(self.book) + env.bookspace + env.rangesep.join(r.str(env) for r in self.ranges)

    def to_string(self, fmt="canonical") -> str:
        """ fmt is one of canonical, full_name or abbreviated """
        return self.str(getenvironment(fmt))

    def __eq__(self, o):
        if not isinstance(o, Pericope):
            return NotImplemented
        return self.book == o.book and self.ranges == o.ranges

    def __hash__(self):
        return hash((self.book, self.ranges))

    def __len__(self):
        return self.verse_count()

    def __iter__(self):
        return iter(self.to_a())

    def __contains__(self, o):
        if isinstance(o, Pericope):
            return self.contains(o)
        if isinstance(o, VerseRef):
            return o.book == self.book and o in set(self.to_a())
        return False

    def __or__(self, o):
        return self.union(o)

    def __and__(self, o):
        return self.intersection(o)

    def __sub__(self, o):
        return self.subtract(o)

    def to_a(self) -> List[VerseRef]:
        return algebra.materialize(self)

    verse_list = to_a

    def isvalid(self) -> bool:
        if not self.book.is_valid() or not self.ranges:
            return False
        return all(r.isvalid(self.book) for r in self.ranges)

    is_valid = isvalid

    def validate(self):
        """ Raises the error describing the first bad coordinate """
        if not self.ranges:
            raise ParseError(str(self.book), "empty pericope")
        for r in self.ranges:
            r.validate(self.book)
        return self

    def is_empty(self) -> bool:
        return not self.ranges

    def is_single_verse(self) -> bool:
        return len(self.ranges) == 1 and self.ranges[0].is_single_verse()

    def is_single_chapter(self) -> bool:
        return all(r.is_single_chapter() for r in self.ranges)

    def spans_chapters(self) -> bool:
        return any(not r.is_single_chapter() for r in self.ranges)

    def spans_books(self) -> bool:
        return False

    def verse_count(self) -> int:
        return len(self.to_a())

    def chapter_list(self) -> List[int]:
        return sorted({c for r in self.ranges for c in r.chapters()})

    def chapter_count(self) -> int:
        return len(self.chapter_list())

    def range_count(self) -> int:
        return len(self.ranges)

    def first_verse(self) -> Optional[VerseRef]:
        if not self.ranges:
            return None
        r = min(self.ranges, key=lambda r: (r.start_chapter, r.start_verse))
        return r.first(self.book)

    def last_verse(self) -> Optional[VerseRef]:
        if not self.ranges:
            return None
        r = max(self.ranges, key=lambda r: (r.end_chapter, r.end_verse))
        return r.last(self.book)

    # set algebra
    def union(self, other) -> "Pericope":
        return algebra.union(self, other)

    def intersection(self, other) -> "Pericope":
        return algebra.intersection(self, other)

    def subtract(self, other) -> "Pericope":
        return algebra.subtract(self, other)

    def complement(self, scope=None) -> "Pericope":
        return algebra.complement(self, scope)

    def normalize(self) -> "Pericope":
        return algebra.normalize(self)

    def expand(self, before: int = 0, after: int = 0) -> "Pericope":
        return algebra.expand(self, before, after)

    def contract(self, fromstart: int = 0, fromend: int = 0) -> "Pericope":
        return algebra.contract(self, fromstart, fromend)

    # analytics
    def verses_in_chapter(self, chapter: int) -> int:
        return analytics.verses_in_chapter(self, chapter)

    def chapters_in_range(self) -> Dict[int, List[int]]:
        return analytics.chapters_in_range(self)

    def density(self) -> float:
        return analytics.density(self)

    def gaps(self) -> List[VerseRef]:
        return analytics.gaps(self)

    def continuous_ranges(self) -> List["Pericope"]:
        return analytics.continuous_ranges(self)

    # comparison
    def intersects(self, other) -> bool:
        return comparator.intersects(self, other)

    overlaps = intersects

    def contains(self, other) -> bool:
        return comparator.contains(self, other)

    def adjacent_to(self, other) -> bool:
        return comparator.adjacent(self, other)

    def precedes(self, other) -> bool:
        return comparator.precedes(self, other)

    def follows(self, other) -> bool:
        return comparator.follows(self, other)


class PericopeJSONEncoder(json.JSONEncoder):
    def default(self, obj):
        if isinstance(obj, (Pericope, VerseRef, Range)):
            return str(obj)
        elif isinstance(obj, set):
            return sorted(obj)
        return super().default(obj)
