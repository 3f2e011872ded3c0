#!/usr/bin/env python3
"""
index_build.py — Build a MARISA trie from kanji to line number.

Usage:
  kdindex kanjidic --output data/kanjidic.trie

The trie maps each character to the index of its line in the dictionary
file, so TrieIndex can fetch any kanji with a single seek. Unlike
KanjidicReader.lookup it does not depend on the order of queries.
"""

import argparse
import logging
import sys
from contextlib import nullcontext
from pathlib import Path
from typing import Optional

import marisa_trie

from kanjidic.parser import MalformedRecordError
from kanjidic.progress_display import ProgressDisplay
from kanjidic.reader import KanjidicReader, open_kanjidic
from kanjidic.record import KanjiRecord


logger = logging.getLogger(__name__)

# One unsigned 32-bit line index per key
RECORD_FORMAT = '<I'


def build_index(reader: KanjidicReader, trie_path: Path, show_progress: bool = True) -> marisa_trie.RecordTrie:
    """
    Build and save the character -> line index trie.

    Args:
        reader: Reader over the dictionary
        trie_path: Output path for the trie
        show_progress: Draw a live progress panel

    Returns:
        The trie that was saved
    """
    logger.info(f"Building index from {len(reader):,} lines")

    items = []
    display = ProgressDisplay("Indexing kanjidic", total=len(reader)) if show_progress else nullcontext()
    with display as progress:
        for record in reader:
            items.append((record.character, (reader.pos - 1,)))
            if progress is not None:
                progress.update(Lines=reader.pos - 1, Kanji=len(items))

    logger.info(f"  -> Indexed {len(items):,} kanji")

    trie = marisa_trie.RecordTrie(RECORD_FORMAT, items)
    trie_path.parent.mkdir(parents=True, exist_ok=True)
    trie.save(str(trie_path))

    trie_size_kb = trie_path.stat().st_size / 1024
    logger.info(f"  Trie saved: {trie_path} ({trie_size_kb:.1f} KB)")
    return trie


class TrieIndex:
    """Random-access lookup through a saved character trie."""

    def __init__(self, trie_path: Path, reader: KanjidicReader):
        self.reader = reader
        self.trie = marisa_trie.RecordTrie(RECORD_FORMAT)
        self.trie.load(str(trie_path))

    def line_of(self, character: str) -> Optional[int]:
        """Line index of the character, or None if it is not indexed."""
        if character not in self.trie:
            return None
        # A character listed twice keeps its first line
        return min(value[0] for value in self.trie[character])

    def get(self, character: str) -> Optional[KanjiRecord]:
        index = self.line_of(character)
        if index is None:
            return None
        return self.reader.read_at(index)

    def __contains__(self, character: str) -> bool:
        return character in self.trie

    def __len__(self) -> int:
        return len(self.trie)


def main():
    parser = argparse.ArgumentParser(description='Build a MARISA trie from kanji to line number')
    parser.add_argument('input', type=Path, help='KANJIDIC file')
    parser.add_argument('--output', type=Path, required=True, help='Output trie path')
    parser.add_argument('--encoding', default=None,
                        help='Encoding of the input (default: $KANJIDIC_ENCODING or euc-jp)')
    parser.add_argument('--skip-malformed', action='store_true',
                        help='Log and skip lines that cannot be parsed')
    parser.add_argument('--no-progress', action='store_true',
                        help='Do not draw the live progress panel')
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s [%(levelname)s] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    logger.info("Index build (MARISA)")
    logger.info(f"  Input: {args.input}")

    if not args.input.exists():
        logger.error(f"Input file not found: {args.input}")
        sys.exit(1)

    with open_kanjidic(args.input, encoding=args.encoding, strict=not args.skip_malformed) as reader:
        try:
            build_index(reader, args.output, show_progress=not args.no_progress)
        except MalformedRecordError as e:
            logger.error(f"{e}")
            sys.exit(1)

    logger.info("")
    logger.info("Index build complete")


if __name__ == '__main__':
    main()
