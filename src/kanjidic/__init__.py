"""
kanjidic - Parse Jim Breen's KANJIDIC kanji dictionary.

Records are parsed one line at a time, so the file can be iterated or
searched without loading it into memory.

Modules:
    record: KanjiRecord dataclass
    parser: Line parser
    reader: Iterator and random-access reader
    source: Byte-offset line source over a file
    joyo: Default Joyo marker set
"""

from kanjidic.joyo import JOYO_KANJI, load_marker_set
from kanjidic.parser import HEADER_MARKER, MalformedRecordError, parse_line
from kanjidic.reader import KanjidicReader, open_kanjidic
from kanjidic.record import KanjiRecord
from kanjidic.source import FileLineSource

__all__ = [
    'JOYO_KANJI',
    'load_marker_set',
    'HEADER_MARKER',
    'MalformedRecordError',
    'parse_line',
    'KanjidicReader',
    'open_kanjidic',
    'KanjiRecord',
    'FileLineSource',
]
