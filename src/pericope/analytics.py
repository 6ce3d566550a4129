from typing import Dict, List
from pericope.algebra import materialize
from pericope.reference import Range, VerseIter, VerseRef


def verses_in_chapter(pericope, chapter: int) -> int:
    """ Counts the verses each range contributes to chapter. Overlapping
        ranges are each counted. """
    if chapter is None or not 1 <= chapter <= pericope.book.chapter_count:
        return 0
    count = 0
    for r in pericope.ranges:
        span = r.chapterspan(pericope.book, chapter)
        if span is not None:
            count += span[1] - span[0] + 1
    return count

def chapters_in_range(pericope) -> Dict[int, List[int]]:
    res = {}
    for v in materialize(pericope):
        res.setdefault(v.chapter, set()).add(v.verse)
    return {c: sorted(res[c]) for c in sorted(res)}

def density(pericope) -> float:
    """ Fraction of the verses of the chapters touched that are included """
    if not pericope.ranges:
        return 0.0
    total = sum(pericope.book.chapter_length(c) for c in pericope.chapter_list())
    if total == 0:
        return 0.0
    return len(materialize(pericope)) / total

def gaps(pericope) -> List[VerseRef]:
    if not pericope.ranges or pericope.is_single_verse():
        return []
    first = pericope.first_verse()
    last = pericope.last_verse()
    verses = set(materialize(pericope))
    return [v for v in VerseIter(first, last) if v not in verses]

def continuous_ranges(pericope) -> list:
    """ Splits the pericope into one single range Pericope per contiguous run """
    if not pericope.ranges:
        return []
    verses = sorted(set(materialize(pericope)))
    if len(verses) == 1 and len(pericope.ranges) == 1:
        return [pericope]
    groups = []
    for v in verses:
        if groups and groups[-1][-1].nextverse() == v:
            groups[-1].append(v)
        else:
            groups.append([v])
    cls = pericope.__class__
    return [cls.from_ranges(pericope.book, [Range.fromRefs(g[0], g[-1])],
                            versification=pericope.versification) for g in groups]
