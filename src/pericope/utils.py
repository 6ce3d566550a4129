import os
import logging

logger = logging.getLogger(__name__)

def readsrc(src):
    """ Returns the text of src, which may be a file object, a path to a file
        or the text itself. Anything with a newline or too long to be a path is
        taken as text. """
    if hasattr(src, "read"):
        return src.read()
    if not isinstance(src, str):
        raise TypeError(f"Cannot read from {type(src).__name__}")
    if "\n" in src or len(src) > 255:
        return src
    if not os.path.exists(src):
        raise FileNotFoundError(src)
    logger.debug(f"Reading {src}")
    with open(src, encoding="utf-8") as inf:
        return inf.read()
