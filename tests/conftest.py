"""Pytest configuration and shared fixtures."""
import pytest
import tempfile
from pathlib import Path


HEADER = "# KANJIDIC JIS X 0208 Kanji Dictionary Version 2004 Copyright 2004"

ICHI = ("一 306C U4e00 N1 B1 G1 S1 F2 H3541 K2 L1 IN2 E1 P4-1-4 I0a1.1 "
        "Q1000.0 MN1 MP1.0001 Yyi1 Wil イチ イツ ひと ひと.つ {one}")
KI = "木 4C7A U6728 B75 G1 S4 F10 N3843 {tree} {wood} き こ ボク モク"
HAYASHI = "林 4E53 U6797 N2216 B75 G1 S8 F954 H2596 P1-4-4 Ylin2 Wrim リン はやし {grove} {forest}"
MORI = "森 3F39 U68ee N2241 B75 G1 S12 F610 P2-4-8 Ysen1 Wsam シン もり {forest} {woods}"
HI = "日 467C U65e5 N2097 B72 G1 S4 F1 P3-3-1 Yri4 Wil ニチ ジツ ひ -び -か {day} {sun} {Japan}"


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_lines():
    """A small dictionary: header line followed by five kanji, in file order."""
    return [HEADER, ICHI, KI, HAYASHI, MORI, HI]


@pytest.fixture
def sample_file(temp_dir, sample_lines):
    """The sample dictionary written to disk in EUC-JP, as distributed."""
    path = temp_dir / "kanjidic"
    with open(path, 'wb') as f:
        for line in sample_lines:
            f.write(line.encode('euc-jp') + b'\n')
    return path


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep the caller's KANJIDIC_* settings out of the tests."""
    monkeypatch.delenv('KANJIDIC_PATH', raising=False)
    monkeypatch.delenv('KANJIDIC_ENCODING', raising=False)
