"""
parser.py — Decode one KANJIDIC line into a KanjiRecord.

A KANJIDIC line is the kanji itself, its JIS code in hex, then a bag of
whitespace-separated tagged tokens in no fixed order:

    木 4C7A U6728 B75 G1 S4 F10 N3843 {tree} {wood} き こ ボク モク

Each rule below finds its token anywhere in what is left of the line,
records the value and cuts the token out, so later rules only see text no
earlier rule claimed. Tagged tokens are matched only at the start of a
whitespace-delimited token: "MN14415" is the Morohashi index and never the
Nelson tag "N14415". Anything no rule recognizes is dropped.

Usage:
    from kanjidic.parser import parse_line

    record = parse_line(line)              # default Joyo marker set
    record = parse_line(line, joyo=set())  # nothing flagged joyo
"""

import re
from typing import AbstractSet, Dict, List, Optional, Tuple

from kanjidic.joyo import JOYO_KANJI
from kanjidic.record import KanjiRecord


# First line of the distributed file
HEADER_MARKER = '# KANJIDIC'

# Reference-work index tags. Two-letter tags come before the one-letter tags
# sharing a letter with them.
REFERENCE_TAGS: Tuple[Tuple[str, str], ...] = (
    ('MN', 'morohashi'),
    ('IN', 'tuttle'),
    ('N', 'nelson'),
    ('B', 'radical_nelson'),
    ('G', 'grade'),
    ('S', 'strokes'),
    ('H', 'halpern'),
    ('F', 'frequency'),
    ('V', 'new_nelson'),
    ('E', 'henshall'),
    ('K', 'gakken'),
    ('L', 'heiseg'),
    ('O', 'oneill'),
)

HEX = '[0-9A-Fa-f]'


def _token(body: str) -> re.Pattern:
    """Compile a pattern matching one whole token plus trailing whitespace."""
    return re.compile(rf'(?<!\S){body}(?!\S)\s*')


RE_CHARACTER = re.compile(r'^(\S+)\s*')
RE_JIS = re.compile(rf'^({HEX}+)(?!\S)\s*')
RE_UNICODE = _token(rf'U({HEX}+)')
RE_MEANING = re.compile(r'\{([^}]+)\}\s*')

# Only the start of the token is anchored; a suffix after the digits
# (MN14415P) is left behind as unrecognized text
RE_REFERENCE = tuple(
    (name, re.compile(rf'(?<!\S){tag}(\d+)\s*')) for tag, name in REFERENCE_TAGS
)

RE_SKIP = _token(r'P([\d\-]+)')
RE_RADICAL = _token(r'C(\d+)')
RE_MOROHASHI_PAGE = _token(r'MP(\d+\.\d+)')
RE_ADDITIONAL = _token(r'D([A-Za-z])(\d+)')
RE_SPAHN = _token(r'I(\d[a-z]\d+\.\d+)')
RE_FOUR_CORNER = _token(r'Q(\d{4}\.\d)')
RE_RESERVED = re.compile(r'^\s*X\S+\s*')
RE_KOREAN_PINYIN = re.compile(r'(?<!\S)([WY])(\w+\d?)\s*')
RE_HIRAGANA = re.compile(r'([ぁ-ゟ][ぁ-ゟ.]*)\s*')
RE_KATAKANA = re.compile(r'([ァ-ヿ]+)\s*')
RE_TRAILER = _token(r'T1')


class MalformedRecordError(ValueError):
    """A line is missing the kanji, its JIS code or its Unicode code."""

    def __init__(self, field: str, line: str):
        self.field = field
        self.line = line
        super().__init__(f"Couldn't parse {field} from line {line!r}")


class _Remainder:
    """The part of a line that no rule has consumed yet."""

    def __init__(self, text: str):
        self.text = text

    def take(self, pattern: re.Pattern) -> Optional[re.Match]:
        """Cut out the first match of pattern, returning it (or None)."""
        m = pattern.search(self.text)
        if m:
            self.text = self.text[:m.start()] + self.text[m.end():]
        return m

    def take_all(self, pattern: re.Pattern) -> List[re.Match]:
        """Cut out every match of pattern, left to right."""
        matches = []
        while True:
            m = self.take(pattern)
            if m is None:
                return matches
            matches.append(m)

    def require(self, pattern: re.Pattern, field: str, line: str) -> str:
        m = self.take(pattern)
        if m is None:
            raise MalformedRecordError(field, line)
        return m.group(1)


def is_record_line(line: str) -> bool:
    """True unless the line is the header comment or blank."""
    return bool(line.strip()) and not line.startswith(HEADER_MARKER)


def parse_line(
    line: str,
    joyo: AbstractSet[str] = JOYO_KANJI,
) -> Optional[KanjiRecord]:
    """
    Parse one decoded KANJIDIC line.

    Args:
        line: Line text without its newline
        joyo: Characters to flag as joyo

    Returns:
        KanjiRecord, or None for the header comment or a blank line

    Raises:
        MalformedRecordError: kanji, JIS code or Unicode code is missing
    """
    line = line.rstrip('\r\n')
    if not is_record_line(line):
        return None

    rest = _Remainder(line)
    character = rest.require(RE_CHARACTER, 'kanji', line)
    jis_code = rest.require(RE_JIS, 'JIS code', line)
    unicode_code = rest.require(RE_UNICODE, 'Unicode value', line)

    # Free text in braces may hold anything, including words that look like
    # tagged tokens, so it goes before any tag is looked for
    meaning = [m.group(1) for m in rest.take_all(RE_MEANING)]

    values: Dict[str, object] = {}
    for name, pattern in RE_REFERENCE:
        m = rest.take(pattern)
        if m:
            values[name] = int(m.group(1))

    m = rest.take(RE_SKIP)
    if m:
        values['skip'] = m.group(1)

    m = rest.take(RE_RADICAL)
    if m:
        values['radical'] = int(m.group(1))
    else:
        values['radical'] = values.get('radical_nelson')

    m = rest.take(RE_MOROHASHI_PAGE)
    if m:
        values['morohashi_page'] = m.group(1)

    additional = {m.group(1): int(m.group(2)) for m in rest.take_all(RE_ADDITIONAL)}

    m = rest.take(RE_SPAHN)
    if m:
        values['spahn'] = m.group(1)

    m = rest.take(RE_FOUR_CORNER)
    if m:
        values['four_corner'] = m.group(1)

    rest.take(RE_RESERVED)

    korean = []
    pinyin = []
    for m in rest.take_all(RE_KOREAN_PINYIN):
        (korean if m.group(1) == 'W' else pinyin).append(m.group(2))

    hiragana = [m.group(1) for m in rest.take_all(RE_HIRAGANA)]
    katakana = [m.group(1) for m in rest.take_all(RE_KATAKANA)]

    rest.take(RE_TRAILER)

    return KanjiRecord(
        character=character,
        jis_code=jis_code,
        unicode_code=unicode_code,
        additional=additional,
        korean=tuple(korean),
        pinyin=tuple(pinyin),
        meaning=tuple(meaning),
        hiragana=tuple(hiragana),
        katakana=tuple(katakana),
        joyo=character in joyo,
        **values,
    )
