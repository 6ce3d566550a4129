class PericopeError(Exception):
    """ Base class of every error raised by the pericope package """


class InvalidBookError(PericopeError):

    def __init__(self, book_input):
        self.book_input = book_input
        super().__init__(f"Invalid book: '{book_input}'")


class InvalidChapterError(PericopeError, ValueError):

    def __init__(self, book, chapter):
        self.book = book
        self.chapter = chapter
        super().__init__(f"Invalid chapter {chapter} for book {book}")


class InvalidVerseError(PericopeError, ValueError):

    def __init__(self, book, chapter, verse):
        self.book = book
        self.chapter = chapter
        self.verse = verse
        super().__init__(f"Invalid verse {chapter}:{verse} for book {book}")


class InvalidRangeError(PericopeError, ValueError):

    def __init__(self, range_text):
        self.range_text = range_text
        super().__init__(f"Invalid range: '{range_text}'")


class ParseError(PericopeError, ValueError):

    def __init__(self, text, reason=None):
        self.text = text
        self.reason = reason
        message = f"Failed to parse: '{text}'"
        if reason:
            message += f" - {reason}"
        super().__init__(message)
