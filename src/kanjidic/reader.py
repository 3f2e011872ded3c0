"""
reader.py — Iterator and random-access reader over a KANJIDIC file.

The reader pulls one raw line at a time from a line source (FileLineSource,
or any sequence of str/bytes where index 0 is the header line), decodes it
and parses it. Every record it parses is cached by character.

lookup() scans forward from where the previous lookup stopped and never
goes back. Characters on lines that earlier scans already passed are only
found if they are in the cache, so lookups should be issued in roughly file
order, or after a full iteration has filled the cache.

Usage:
    reader = open_kanjidic('kanjidic')
    for record in reader:
        print(record.character, record.meaning)

    record = reader.lookup('木')
"""

import logging
import os
from pathlib import Path
from types import MappingProxyType
from typing import AbstractSet, Dict, Iterator, Mapping, Optional, Sequence, Union

from kanjidic.joyo import JOYO_KANJI
from kanjidic.parser import MalformedRecordError, parse_line
from kanjidic.record import KanjiRecord
from kanjidic.source import FileLineSource

logger = logging.getLogger(__name__)

DEFAULT_PATH = 'kanjidic'
DEFAULT_ENCODING = 'euc-jp'

RawLine = Union[str, bytes]


class KanjidicReader:
    """
    Iterator and random-access reader for one dictionary file.

    State is private to the instance: the iteration cursor (next line to
    read, starting after the header), the character cache and the
    last-sought offset of the forward lookup scan. Readers are not meant to
    be shared between threads; give each thread its own.
    """

    def __init__(
        self,
        source: Sequence[RawLine],
        joyo: AbstractSet[str] = JOYO_KANJI,
        encoding: str = DEFAULT_ENCODING,
        strict: bool = True,
    ):
        """
        Args:
            source: Line source; index 0 is the header line
            joyo: Characters to flag as joyo
            encoding: Encoding of bytes lines
            strict: Raise on malformed lines instead of skipping them
        """
        self.source = source
        self.joyo = joyo
        self.encoding = encoding
        self.strict = strict

        self.pos = 1
        self._cache: Dict[str, KanjiRecord] = {}
        self._last_sought = 0

    @property
    def cache(self) -> Mapping[str, KanjiRecord]:
        """Read-only view of every record parsed so far."""
        return MappingProxyType(self._cache)

    @property
    def last_sought(self) -> int:
        """Line index where the next lookup scan starts."""
        return self._last_sought

    def __len__(self) -> int:
        return len(self.source)

    def reset(self) -> None:
        """Rewind the iterator to the first record. The cache is kept."""
        self.pos = 1

    def advance(self) -> Optional[KanjiRecord]:
        """
        Return the record at the cursor and move the cursor on.

        Returns None once the cursor is past the last line (the cursor then
        stays put), and for a header or blank line.
        """
        if self.pos >= len(self.source):
            return None

        index = self.pos
        self.pos += 1
        return self.read_at(index)

    def read_at(self, index: int) -> Optional[KanjiRecord]:
        """
        Return the record on line `index`, leaving the cursor alone.

        Returns None for an index outside the file, the header, blank lines,
        and malformed lines when not strict.

        Raises:
            MalformedRecordError: Line cannot be parsed (strict mode)
        """
        if index < 0 or index >= len(self.source):
            return None

        line = self._decode(self.source[index])
        try:
            record = parse_line(line, self.joyo)
        except MalformedRecordError:
            if self.strict:
                raise
            logger.warning(f"Skipping malformed line {index}: {line!r}")
            return None

        if record is not None:
            self._cache[record.character] = record
        return record

    def lookup(self, character: str) -> Optional[KanjiRecord]:
        """
        Find the record for a character.

        Cached records come back without touching the file. Otherwise lines
        are read from the last-sought offset onwards until the character
        turns up; the offset is left on the last line read, matched or not.
        May be slow.

        Returns:
            KanjiRecord, or None if the character is not at or after the
            last-sought offset
        """
        record = self._cache.get(character)
        if record is not None:
            return record

        start = self._last_sought
        for index in range(start, len(self.source)):
            record = self.read_at(index)
            self._last_sought = index
            if record is not None and record.character == character:
                logger.debug(f"Found {character} on line {index} after scanning from {start}")
                return record

        logger.debug(f"{character} not found scanning from line {start}")
        return None

    def __iter__(self) -> Iterator[KanjiRecord]:
        """Yield every record from the first line after the header."""
        self.reset()
        while self.pos < len(self.source):
            record = self.advance()
            if record is not None:
                yield record

    def _decode(self, raw: RawLine) -> str:
        if isinstance(raw, bytes):
            raw = raw.decode(self.encoding)
        return raw.rstrip('\r\n')

    def close(self) -> None:
        close = getattr(self.source, 'close', None)
        if close is not None:
            close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False


def open_kanjidic(
    path: Optional[Union[str, Path]] = None,
    encoding: Optional[str] = None,
    joyo: AbstractSet[str] = JOYO_KANJI,
    strict: bool = True,
) -> KanjidicReader:
    """
    Open a reader over a dictionary file.

    The path defaults to $KANJIDIC_PATH, then ./kanjidic; the encoding to
    $KANJIDIC_ENCODING, then EUC-JP.
    """
    path = Path(path or os.environ.get('KANJIDIC_PATH', DEFAULT_PATH))
    encoding = encoding or os.environ.get('KANJIDIC_ENCODING', DEFAULT_ENCODING)

    source = FileLineSource(path)
    logger.debug(f"Opened {path} ({len(source):,} lines, {encoding})")
    return KanjidicReader(source, joyo=joyo, encoding=encoding, strict=strict)
