import re, os, logging
from pericope.utils import readsrc

logger = logging.getLogger(__name__)

DEFAULT_VERSIFICATION = "eng"

_loaded = {}

_rebook = re.compile(r"^[1-4A-Z][A-Z0-9][A-Z0-9]$")
_rename = re.compile(r'^#\s+versification\s*"(.*?)"', flags=re.I)
_remagic = re.compile(r"#!\s*")
_recomment = re.compile(r"\s*#.*$")


def _vrspath(name):
    if os.path.exists(name):
        return name
    fpath = os.path.join(os.path.dirname(__file__), name + ".vrs")
    return fpath if os.path.exists(fpath) else None

def cached_versification(fname=None):
    """ Returns the Versification held in fname, which may be a path to a .vrs
        file or the name of one shipped with the package. Each file is only read
        once per process. None if there is no such file. """
    name = fname or DEFAULT_VERSIFICATION
    if name not in _loaded:
        fpath = _vrspath(name)
        if fpath is None:
            logger.debug(f"No versification file for {name}")
            return None
        _loaded[name] = Versification(fpath)
    return _loaded[name]


class Versification:
    """ Chapter and verse structure of every book, read from a Paratext style
        .vrs file. Only the chapter/verse lists are used. Mappings between
        versifications, excluded verses and segments are skipped. """

    def __init__(self, src=None):
        self.chapters = {}      # verse count of each chapter keyed by book
        self.name = None
        if src is not None:
            self.readFile(src)

    def __contains__(self, bk):
        return bk in self.chapters

    def _addline(self, line):
        if "=" in line or line[0] in "-*":
            return False
        b = line.split()
        if not _rebook.match(b[0]):
            return False
        self.chapters[b[0]] = tuple(int(x.rsplit(":", 1)[1]) for x in b[1:])
        return True

    def readFile(self, src):
        skipped = 0
        for li in readsrc(src).splitlines():
            l = li.strip()
            if self.name is None and (m := _rename.match(l)):
                self.name = m.group(1)
                continue
            l = _recomment.sub("", _remagic.sub("", l))
            if l and not self._addline(l):
                skipped += 1
        logger.debug(f"versification {self.name} has {len(self.chapters)} books, ignored {skipped} lines")

    def books(self):
        return list(self.chapters.keys())

    def chapter_count(self, bk):
        return len(self.chapters.get(bk, ()))

    def chapter_length(self, bk, chap):
        """ Returns the number of verses in the given chapter, 0 if there is no
            such chapter """
        counts = self.chapters.get(bk, ())
        if chap is None or not 1 <= chap <= len(counts):
            return 0
        return counts[chap-1]

    def verses(self, bk):
        """ Returns a tuple of the verse count of each chapter in the book """
        return self.chapters.get(bk, ())
