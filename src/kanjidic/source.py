"""
source.py — Random access to the raw lines of a dictionary file.

KANJIDIC is a single file of variable-length lines, so one pass records the
byte offset of every line start; after that any line can be read with a
single seek, and only the offsets live in memory.

Usage:
    with FileLineSource('kanjidic') as source:
        header = source[0]       # raw bytes, newline stripped
        print(len(source))
"""

import logging
from pathlib import Path
from typing import BinaryIO, List, Optional, Union

logger = logging.getLogger(__name__)


class FileLineSource:
    """
    Line-number addressable view of a file.

    Index 0 is the first line of the file. Lines come back as bytes; decoding
    is left to the reader.
    """

    def __init__(self, path: Union[str, Path], line_offsets: Optional[List[int]] = None):
        self.path = Path(path)
        if not self.path.exists():
            raise FileNotFoundError(f"Dictionary file not found: {self.path}")

        self.line_offsets = line_offsets if line_offsets is not None else self._scan_offsets(self.path)
        self._file: Optional[BinaryIO] = None

    @staticmethod
    def _scan_offsets(path: Path) -> List[int]:
        """Byte offset of each line start."""
        offsets = []
        with open(path, 'rb') as f:
            offset = 0
            for line in f:
                offsets.append(offset)
                offset += len(line)

        logger.debug(f"Indexed {len(offsets):,} lines in {path}")
        return offsets

    def __len__(self) -> int:
        return len(self.line_offsets)

    def __getitem__(self, index: int) -> bytes:
        if index < 0 or index >= len(self.line_offsets):
            raise IndexError(f"Line {index} out of range (0-{len(self.line_offsets) - 1})")

        if self._file is None:
            self._file = open(self.path, 'rb')

        self._file.seek(self.line_offsets[index])
        return self._file.readline().rstrip(b'\r\n')

    def close(self) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    def __repr__(self) -> str:
        return f"FileLineSource({str(self.path)!r}, lines={len(self)})"
