#!/usr/bin/env python3

from typing import Optional, Iterator
from dataclasses import dataclass
from pericope.errors import InvalidChapterError, InvalidVerseError, InvalidRangeError


class Environment:
    """ Settings used when rendering references as text """
    rangesep: str = ","         # between ranges
    cvsep: str = ":"            # after chap before verse
    bookspace: str = " "        # after the book
    rangemk: str = "-"
    booklabel: str = "code"     # code or name
    __allfields__ = "rangesep cvsep bookspace rangemk booklabel".split()

    def __init__(self, **kw):
        for k, v in kw.items():
            setattr(self, k, v)

    def localbook(self, book) -> str:
        if self.booklabel == "name":
            return getattr(book, "name", str(book))
        return getattr(book, "code", str(book))

    def localchapter(self, c: int) -> str:
        return str(c)

    def localverse(self, v: int) -> str:
        return str(v)

    def copy(self, **kw):
        res = self.__class__()
        for a in self.__allfields__:
            setattr(res, a, kw[a] if a in kw else getattr(self, a))
        return res

environments = {
    "canonical": Environment(),
    "full_name": Environment(booklabel="name"),
    "abbreviated": Environment(),
}

def getenvironment(fmt) -> Environment:
    """ Returns the Environment for a named format, canonical if unknown """
    if isinstance(fmt, Environment):
        return fmt
    return environments.get(str(fmt).lstrip(":"), environments["canonical"])


@dataclass(frozen=True)
class VerseRef:
    """ A single verse of a book. VerseRefs order by (chapter, verse) and are
        only comparable within one book. The book may be anything with a code,
        a chapter_count and a chapter_length(chapter). """
    book: object
    chapter: int
    verse: int

    def __str__(self):
        return self.str()

    def __repr__(self):
        return "VerseRef('"+self.str()+"')"

    def str(self, env: Optional[Environment] = None) -> str:
        if env is None:
            env = environments["canonical"]
        return "".join([env.localbook(self.book), env.bookspace, env.localchapter(self.chapter),
                        env.cvsep, env.localverse(self.verse)])

    def _key(self):
        return (self.chapter, self.verse)

    def __lt__(self, o):
        if not isinstance(o, VerseRef):
            return NotImplemented
        return self._key() < o._key()

    def __le__(self, o):
        if not isinstance(o, VerseRef):
            return NotImplemented
        return self._key() <= o._key()

    def __gt__(self, o):
        if not isinstance(o, VerseRef):
            return NotImplemented
        return self._key() > o._key()

    def __ge__(self, o):
        if not isinstance(o, VerseRef):
            return NotImplemented
        return self._key() >= o._key()

    def is_before(self, o) -> bool:
        return self < o

    def is_after(self, o) -> bool:
        return self > o

    def to_int(self) -> int:
        """ Returns an integer BBCCCVVV """
        return (getattr(self.book, "number", 0) * 1000 + self.chapter) * 1000 + self.verse

    def copy(self, **kws):
        kw = {"book": self.book, "chapter": self.chapter, "verse": self.verse}
        kw.update(kws)
        return self.__class__(**kw)

    def nextverse(self) -> Optional["VerseRef"]:
        """ Returns the verse following this one or None at the end of the book """
        if self.verse < self.book.chapter_length(self.chapter):
            return self.copy(verse=self.verse + 1)
        elif self.chapter < self.book.chapter_count:
            return self.copy(chapter=self.chapter + 1, verse=1)
        return None

    def prevverse(self) -> Optional["VerseRef"]:
        """ Returns the verse preceding this one or None at the start of the book """
        if self.verse > 1:
            return self.copy(verse=self.verse - 1)
        elif self.chapter > 1:
            chap = self.chapter - 1
            return self.copy(chapter=chap, verse=self.book.chapter_length(chap))
        return None

    next_verse = nextverse
    previous_verse = prevverse

    def isvalid(self) -> bool:
        """ Returns whether the reference lies inside its book """
        if self.chapter < 1 or self.chapter > self.book.chapter_count:
            return False
        return 1 <= self.verse <= self.book.chapter_length(self.chapter)

    is_valid = isvalid

    def validate(self):
        if self.chapter < 1 or self.chapter > self.book.chapter_count:
            raise InvalidChapterError(getattr(self.book, "code", self.book), self.chapter)
        if not 1 <= self.verse <= self.book.chapter_length(self.chapter):
            raise InvalidVerseError(getattr(self.book, "code", self.book), self.chapter, self.verse)
        return self


@dataclass(frozen=True)
class Range:
    """ An inclusive span of verses from start to end. The book is supplied by
        the owning Pericope. """
    start_chapter: int
    start_verse: int
    end_chapter: int
    end_verse: int

    def __post_init__(self):
        if (self.end_chapter, self.end_verse) < (self.start_chapter, self.start_verse):
            raise InvalidRangeError(self.str())

    @classmethod
    def fromRefs(cls, first: VerseRef, last: VerseRef) -> "Range":
        return cls(first.chapter, first.verse, last.chapter, last.verse)

    @classmethod
    def single(cls, chapter: int, verse: int) -> "Range":
        return cls(chapter, verse, chapter, verse)

    def __str__(self):
        return self.str()

    def __repr__(self):
        return "Range('"+self.str()+"')"

    def str(self, env: Optional[Environment] = None) -> str:
        if env is None:
            env = environments["canonical"]
        res = [env.localchapter(self.start_chapter), env.cvsep, env.localverse(self.start_verse)]
        if self.is_single_verse():
            return "".join(res)
        res.append(env.rangemk)
        if self.start_chapter != self.end_chapter:
            res.extend([env.localchapter(self.end_chapter), env.cvsep])
        res.append(env.localverse(self.end_verse))
        return "".join(res)

    def is_single_verse(self) -> bool:
        return self.start_chapter == self.end_chapter and self.start_verse == self.end_verse

    def is_single_chapter(self) -> bool:
        return self.start_chapter == self.end_chapter

    def first(self, book) -> VerseRef:
        return VerseRef(book, self.start_chapter, self.start_verse)

    def last(self, book) -> VerseRef:
        return VerseRef(book, self.end_chapter, self.end_verse)

    def chapters(self):
        return range(self.start_chapter, self.end_chapter + 1)

    def chapterspan(self, book, chapter):
        """ Returns the (first, last) verse numbers this range covers in
            chapter, clamped to the chapter. None if it misses the chapter """
        if not self.start_chapter <= chapter <= self.end_chapter:
            return None
        first = self.start_verse if chapter == self.start_chapter else 1
        last = self.end_verse if chapter == self.end_chapter else book.chapter_length(chapter)
        return (first, last)

    def verses(self, book) -> Iterator[VerseRef]:
        """ Yields every verse of the range in order, chapter by chapter """
        if self.is_single_verse():
            yield self.first(book)
            return
        for c in self.chapters():
            first, last = self.chapterspan(book, c)
            for v in range(first, last + 1):
                yield VerseRef(book, c, v)

    def isvalid(self, book) -> bool:
        return self.first(book).isvalid() and self.last(book).isvalid()

    def validate(self, book):
        self.first(book).validate()
        self.last(book).validate()
        return self


class VerseIter:
    """ Walks from first to last inclusive by repeated nextverse """

    def __init__(self, first: VerseRef, last: VerseRef):
        self.r = first
        self.last = last

    def __iter__(self):
        return self

    def __next__(self):
        if self.r is None or self.r > self.last:
            raise StopIteration
        res = self.r
        if self.r >= self.last:
            self.r = None
        else:
            self.r = self.r.nextverse()
        return res
