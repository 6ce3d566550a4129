#!/usr/bin/env python3

""" Scripture references as sets of verses.

    >>> from pericope import Pericope
    >>> str(Pericope("GEN 1:1-10") | Pericope("GEN 1:5-15"))
    'GEN 1:1-15'
"""

from pericope.errors import (PericopeError, ParseError, InvalidBookError, InvalidChapterError,
                             InvalidVerseError, InvalidRangeError)
from pericope.books import Book, all_books, find_by_code, find_by_name, find_by_number
from pericope.versification import Versification, cached_versification
from pericope.reference import VerseRef, Range, Environment
from pericope.parser import parse_reference, scan, split
from pericope.pericope import Pericope, PericopeJSONEncoder

__version__ = "0.1.0"
