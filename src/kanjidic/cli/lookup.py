#!/usr/bin/env python3
"""
kdlookup - Look up kanji in a KANJIDIC file.

Prints one JSON object per kanji found. Lookups scan forward through the
file, so kanji given out of file order may be missed; --preload reads the
whole file first, --index uses a trie built by kdindex.

Usage:
    kdlookup 木 林 [--input kanjidic] [--encoding euc-jp]
    kdlookup 木林森 --index data/kanjidic.trie

Exit status is 1 if any kanji was not found.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import orjson

from kanjidic.index_build import TrieIndex
from kanjidic.joyo import JOYO_KANJI, load_marker_set
from kanjidic.parser import MalformedRecordError
from kanjidic.reader import open_kanjidic


logger = logging.getLogger(__name__)


def split_characters(args: List[str]) -> List[str]:
    """Split arguments into single characters, keeping order, dropping repeats."""
    chars = []
    for arg in args:
        for ch in arg:
            if not ch.isspace() and ch not in chars:
                chars.append(ch)
    return chars


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='kdlookup',
        description='Look up kanji in a KANJIDIC file',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument('kanji', nargs='+', help='Kanji to look up')
    parser.add_argument('--input', type=Path, default=None,
                        help='KANJIDIC file (default: $KANJIDIC_PATH or ./kanjidic)')
    parser.add_argument('--encoding', default=None,
                        help='Encoding of the input (default: $KANJIDIC_ENCODING or euc-jp)')
    parser.add_argument('--joyo-file', type=Path, default=None,
                        help='Replacement Joyo marker set, one character per line')
    parser.add_argument('--index', type=Path, default=None,
                        help='Trie built by kdindex, for order-independent lookup')
    parser.add_argument('--preload', action='store_true',
                        help='Read the whole file before looking anything up')
    parser.add_argument('--full', action='store_true',
                        help='Include absent fields in the output')
    parser.add_argument('-v', '--verbose', action='store_true', help='Debug logging')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for kdlookup."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s [%(levelname)s] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    if args.index is not None and not args.index.exists():
        logger.error(f"Index file not found: {args.index}")
        logger.error("Build one with kdindex, or drop --index.")
        return 1

    joyo = load_marker_set(args.joyo_file) if args.joyo_file else JOYO_KANJI

    try:
        reader = open_kanjidic(args.input, encoding=args.encoding, joyo=joyo)
    except FileNotFoundError as e:
        logger.error(f"{e}")
        return 1

    missing = []
    with reader:
        try:
            if args.index is not None:
                try:
                    lookup = TrieIndex(args.index, reader).get
                except (OSError, RuntimeError) as e:
                    logger.error(f"Cannot load index {args.index}: {e}")
                    return 1
            else:
                if args.preload:
                    for _ in reader:
                        pass
                lookup = reader.lookup

            for ch in split_characters(args.kanji):
                record = lookup(ch)
                if record is None:
                    missing.append(ch)
                    continue
                print(orjson.dumps(record.to_dict(include_empty=args.full)).decode('utf-8'))
        except MalformedRecordError as e:
            logger.error(f"{e}")
            return 1

    for ch in missing:
        print(f"Not found: {ch}", file=sys.stderr)
    return 1 if missing else 0


if __name__ == "__main__":
    sys.exit(main())
