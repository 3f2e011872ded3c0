#!/usr/bin/env python3
"""
export_jsonl.py — Export a KANJIDIC file to JSONL.

Reads:
  - a KANJIDIC file (EUC-JP by default)

Outputs:
  - one JSON object per kanji, keys sorted, absent fields omitted

Usage:
  kdexport kanjidic data/kanjidic.jsonl [--encoding euc-jp] [--skip-malformed]
"""

import argparse
import logging
import sys
from contextlib import nullcontext
from pathlib import Path

import orjson

from kanjidic.joyo import JOYO_KANJI, load_marker_set
from kanjidic.parser import MalformedRecordError
from kanjidic.progress_display import ProgressDisplay
from kanjidic.reader import KanjidicReader, open_kanjidic


logger = logging.getLogger(__name__)


def export_jsonl(reader: KanjidicReader, output_path: Path, show_progress: bool = True) -> int:
    """
    Write every record in the reader to a JSONL file.

    Args:
        reader: Reader over the dictionary
        output_path: Destination file (parent directories are created)
        show_progress: Draw a live progress panel

    Returns:
        Number of records written
    """
    output_path.parent.mkdir(parents=True, exist_ok=True)
    logger.info(f"Writing records to {output_path}")

    written = 0
    display = ProgressDisplay("Exporting kanjidic", total=len(reader)) if show_progress else nullcontext()
    with display as progress, open(output_path, 'wb') as f:
        for record in reader:
            f.write(orjson.dumps(record.to_dict(), option=orjson.OPT_SORT_KEYS) + b'\n')
            written += 1
            if progress is not None:
                progress.update(Lines=reader.pos - 1, Records=written)

    logger.info(f"  -> Wrote {written:,} records")
    return written


def main():
    parser = argparse.ArgumentParser(description='Export a KANJIDIC file to JSONL')
    parser.add_argument('input', type=Path, help='KANJIDIC file')
    parser.add_argument('output', type=Path, help='Output JSONL file')
    parser.add_argument('--encoding', default=None,
                        help='Encoding of the input (default: $KANJIDIC_ENCODING or euc-jp)')
    parser.add_argument('--joyo-file', type=Path, default=None,
                        help='Replacement Joyo marker set, one character per line')
    parser.add_argument('--skip-malformed', action='store_true',
                        help='Log and skip lines that cannot be parsed')
    parser.add_argument('--no-progress', action='store_true',
                        help='Do not draw the live progress panel')
    parser.add_argument('-v', '--verbose', action='store_true', help='Debug logging')
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s [%(levelname)s] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    if not args.input.exists():
        logger.error(f"Input file not found: {args.input}")
        sys.exit(1)

    joyo = load_marker_set(args.joyo_file) if args.joyo_file else JOYO_KANJI

    logger.info("KANJIDIC export (JSONL)")
    logger.info(f"  Input: {args.input}")

    with open_kanjidic(args.input, encoding=args.encoding, joyo=joyo,
                       strict=not args.skip_malformed) as reader:
        try:
            export_jsonl(reader, args.output, show_progress=not args.no_progress)
        except MalformedRecordError as e:
            logger.error(f"{e}")
            logger.error("Re-run with --skip-malformed to skip such lines.")
            sys.exit(1)

    logger.info("")
    logger.info("Export complete")


if __name__ == '__main__':
    main()
