""" Ordering and overlap tests between two Pericopes of the same book. Each
returns False for Pericopes of different books, and any test that needs the
first or last verse of an empty Pericope is False. """

from pericope.algebra import materialize, same_book


def intersects(a, b) -> bool:
    if not same_book(a, b):
        return False
    return not set(materialize(a)).isdisjoint(materialize(b))

overlaps = intersects

def contains(a, b) -> bool:
    """ Every verse of b is in a """
    if not same_book(a, b):
        return False
    return set(materialize(b)).issubset(materialize(a))

def adjacent(a, b) -> bool:
    """ One pericope begins at the verse following the end of the other """
    if not same_book(a, b):
        return False
    afirst, alast = a.first_verse(), a.last_verse()
    bfirst, blast = b.first_verse(), b.last_verse()
    if None in (afirst, alast, bfirst, blast):
        return False
    return alast.nextverse() == bfirst or blast.nextverse() == afirst

def precedes(a, b) -> bool:
    if not same_book(a, b):
        return False
    alast, bfirst = a.last_verse(), b.first_verse()
    if alast is None or bfirst is None:
        return False
    return alast < bfirst

def follows(a, b) -> bool:
    if not same_book(a, b):
        return False
    afirst, blast = a.first_verse(), b.last_verse()
    if afirst is None or blast is None:
        return False
    return afirst > blast
