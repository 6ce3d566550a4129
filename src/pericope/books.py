from typing import Optional, List, Tuple
from dataclasses import dataclass, field
import difflib, re
from pericope.versification import cached_versification, DEFAULT_VERSIFICATION

# code|name|aliases in canonical order. Numbers follow the order.
_bookslist = """GEN|Genesis|Gen,Ge,Gn,Genisis,Geneses,Book of Genesis
    EXO|Exodus|Exod,Ex,Book of Exodus
    LEV|Leviticus|Lev,Le,Lv,Book of Leviticus
    NUM|Numbers|Num,Nu,Nb,Book of Numbers
    DEU|Deuteronomy|Deut,De,Dt,Book of Deuteronomy
    JOS|Joshua|Josh,Jos,Book of Joshua
    JDG|Judges|Judg,Jdg,Book of Judges
    RUT|Ruth|Ru,Rth,Book of Ruth
    1SA|1 Samuel|1Sam,1 Sam,1 Sa,First Samuel,1st Samuel,I Samuel
    2SA|2 Samuel|2Sam,2 Sam,2 Sa,Second Samuel,2nd Samuel,II Samuel
    1KI|1 Kings|1Kgs,1 Kgs,1 Ki,First Kings,1st Kings,I Kings
    2KI|2 Kings|2Kgs,2 Kgs,2 Ki,Second Kings,2nd Kings,II Kings
    1CH|1 Chronicles|1Chr,1 Chr,1 Ch,First Chronicles,1st Chronicles,I Chronicles
    2CH|2 Chronicles|2Chr,2 Chr,2 Ch,Second Chronicles,2nd Chronicles,II Chronicles
    EZR|Ezra|Ezr,Book of Ezra
    NEH|Nehemiah|Neh,Ne,Book of Nehemiah
    EST|Esther|Esth,Es,Book of Esther
    JOB|Job|Jb,Book of Job
    PSA|Psalms|Psalm,Ps,Psa,Pss,Book of Psalms
    PRO|Proverbs|Prov,Pr,Prv,Book of Proverbs
    ECC|Ecclesiastes|Eccl,Ec,Ecc,Qoheleth,Book of Ecclesiastes
    SNG|Song of Songs|Song,SS,Song of Solomon,Canticles,Cant
    ISA|Isaiah|Isa,Is,Book of Isaiah
    JER|Jeremiah|Jer,Je,Jr,Book of Jeremiah
    LAM|Lamentations|Lam,La,Book of Lamentations
    EZK|Ezekiel|Ezek,Eze,Ezk,Book of Ezekiel
    DAN|Daniel|Dan,Da,Dn,Book of Daniel
    HOS|Hosea|Hos,Ho,Book of Hosea
    JOL|Joel|Joe,Jl,Book of Joel
    AMO|Amos|Am,Book of Amos
    OBA|Obadiah|Obad,Ob,Book of Obadiah
    JON|Jonah|Jon,Jnh,Book of Jonah
    MIC|Micah|Mic,Mi,Book of Micah
    NAM|Nahum|Nah,Na,Book of Nahum
    HAB|Habakkuk|Hab,Hb,Book of Habakkuk
    ZEP|Zephaniah|Zeph,Zp,Book of Zephaniah
    HAG|Haggai|Hag,Hg,Book of Haggai
    ZEC|Zechariah|Zech,Zc,Book of Zechariah
    MAL|Malachi|Mal,Ml,Book of Malachi
    MAT|Matthew|Matt,Mt,Mathew,Mattew,Gospel of Matthew,St Matthew,Saint Matthew
    MRK|Mark|Mk,Mar,Mrk,Gospel of Mark,St Mark,Saint Mark
    LUK|Luke|Lk,Luk,Gospel of Luke,St Luke,Saint Luke
    JHN|John|Jn,Jhn,Joh,Gospel of John,St John,Saint John
    ACT|Acts|Ac,Act,Acts of the Apostles,Book of Acts
    ROM|Romans|Rom,Ro,Rm,Letter to the Romans
    1CO|1 Corinthians|1Corinthians,1Cor,1 Cor,First Corinthians,1st Corinthians,I Corinthians,ICO,I CO
    2CO|2 Corinthians|2Corinthians,2Cor,2 Cor,Second Corinthians,2nd Corinthians,II Corinthians,IICO,II CO
    GAL|Galatians|Gal,Ga,Letter to the Galatians
    EPH|Ephesians|Eph,Ep,Letter to the Ephesians
    PHP|Philippians|Phil,Php,Ph,Letter to the Philippians
    COL|Colossians|Col,Letter to the Colossians
    1TH|1 Thessalonians|1Thess,1 Thess,1 Th,First Thessalonians,1st Thessalonians,I Thessalonians
    2TH|2 Thessalonians|2Thess,2 Thess,2 Th,Second Thessalonians,2nd Thessalonians,II Thessalonians
    1TI|1 Timothy|1Tim,1 Tim,1 Ti,First Timothy,1st Timothy,I Timothy
    2TI|2 Timothy|2Tim,2 Tim,2 Ti,Second Timothy,2nd Timothy,II Timothy
    TIT|Titus|Tit,Letter to Titus
    PHM|Philemon|Phlm,Phm,Letter to Philemon
    HEB|Hebrews|Heb,He,Letter to the Hebrews
    JAS|James|Jas,Jm,Letter of James
    1PE|1 Peter|1Pet,1 Pet,1 Pe,First Peter,1st Peter,I Peter
    2PE|2 Peter|2Pet,2 Pet,2 Pe,Second Peter,2nd Peter,II Peter
    1JN|1 John|1Jn,1 Jn,1 Jo,First John,1st John,I John
    2JN|2 John|2Jn,2 Jn,2 Jo,Second John,2nd John,II John
    3JN|3 John|3Jn,3 Jn,3 Jo,Third John,3rd John,III John
    JUD|Jude|Jd,Letter of Jude
    REV|Revelation|Rev,Re,Rv,Apocalypse,Revelations,Book of Revelation"""

_oldTestamentCount = 39


@dataclass(frozen=True)
class Book:
    """ A book of the canon together with the number of verses in each of its
        chapters. Books compare equal on code, number and name. """
    code: str
    number: int
    name: str
    testament: str
    aliases: Tuple[str, ...] = field(default=(), compare=False)
    verses: Tuple[int, ...] = field(default=(), compare=False, repr=False)

    @property
    def chapter_count(self) -> int:
        return len(self.verses)

    def chapter_length(self, chapter: int) -> int:
        """ Returns the number of verses in chapter, 0 if there is no such chapter """
        if chapter is None or chapter < 1 or chapter > len(self.verses):
            return 0
        return self.verses[chapter-1]

    @property
    def verse_total(self) -> int:
        return sum(self.verses)

    @property
    def is_old_testament(self) -> bool:
        return self.testament == "old"

    @property
    def is_new_testament(self) -> bool:
        return self.testament == "new"

    def is_valid(self) -> bool:
        return self.chapter_count > 0

    def __str__(self):
        return self.code


def _compact(s: str) -> str:
    return re.sub(r"[\s.]+", "", s.casefold())

def _loadbooks(vrsname=DEFAULT_VERSIFICATION) -> List[Book]:
    vrs = cached_versification(vrsname)
    res = []
    for i, l in enumerate(_bookslist.splitlines()):
        code, name, aliases = l.strip().split("|")
        res.append(Book(code=code, number=i+1, name=name,
                        testament="old" if i < _oldTestamentCount else "new",
                        aliases=tuple(a.strip() for a in aliases.split(",")),
                        verses=vrs.verses(code) if vrs is not None else ()))
    return res

allbooks = _loadbooks()
books = {b.code: b for b in allbooks}
booknumbers = {b.number: b for b in allbooks}

_aliasmap = {}
_compactmap = {}
for _b in allbooks:
    for _a in (_b.code, _b.name) + _b.aliases:
        _aliasmap.setdefault(_a.casefold(), _b)
        _compactmap.setdefault(_compact(_a), _b)


def all_books() -> List[Book]:
    return list(allbooks)

def find_by_code(code: str) -> Optional[Book]:
    if not code:
        return None
    return books.get(code.strip().upper(), None)

def find_by_number(number: int) -> Optional[Book]:
    return booknumbers.get(number, None)

def find_by_name(name: str, fuzzy: bool = True) -> Optional[Book]:
    """ Finds a book by code, name or alias ignoring case. With fuzzy, falls
        back to an unambiguous prefix and then to the closest spelling. """
    if not name or not name.strip():
        return None
    key = " ".join(name.split()).casefold()
    if key in _aliasmap:
        return _aliasmap[key]
    compact = _compact(key)
    if compact in _compactmap:
        return _compactmap[compact]
    if not fuzzy or len(compact) < 2:
        return None
    candidates = {b for k, b in _compactmap.items() if k.startswith(compact)}
    if len(candidates) == 1:
        return candidates.pop()
    if len(compact) < 4:
        return None
    close = difflib.get_close_matches(compact, list(_compactmap.keys()), n=1, cutoff=0.8)
    if close:
        return _compactmap[close[0]]
    return None
