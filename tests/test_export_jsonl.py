"""Tests for JSONL export."""

import orjson
import pytest

from kanjidic.export_jsonl import export_jsonl
from kanjidic.parser import MalformedRecordError
from kanjidic.reader import KanjidicReader, open_kanjidic


def test_export_writes_one_line_per_record(sample_file, temp_dir):
    """Each kanji becomes one sorted-key JSON object."""
    output = temp_dir / "out" / "kanjidic.jsonl"

    with open_kanjidic(sample_file) as reader:
        count = export_jsonl(reader, output, show_progress=False)

    assert count == 5
    lines = output.read_bytes().splitlines()
    assert len(lines) == 5

    ki = orjson.loads(lines[1])
    assert ki["character"] == "木"
    assert ki["meaning"] == ["tree", "wood"]
    assert ki["radical"] == 75
    assert ki["joyo"] is True
    assert "skip" not in ki
    assert list(ki) == sorted(ki)


def test_export_keeps_additional_mapping(temp_dir):
    """The additional indices export as a JSON object."""
    reader = KanjidicReader(["# KANJIDIC", "木 4C7A U6728 DR3625 DK2"])
    output = temp_dir / "kanjidic.jsonl"
    export_jsonl(reader, output, show_progress=False)

    entry = orjson.loads(output.read_bytes().splitlines()[0])
    assert entry["additional"] == {"R": 3625, "K": 2}


def test_export_with_progress(sample_file, temp_dir):
    """The progress panel does not change the output."""
    output = temp_dir / "kanjidic.jsonl"
    with open_kanjidic(sample_file) as reader:
        assert export_jsonl(reader, output, show_progress=True) == 5


def test_export_strict_stops_on_malformed(temp_dir):
    """A malformed line aborts a strict export."""
    reader = KanjidicReader(["# KANJIDIC", "木 4C7A"])
    with pytest.raises(MalformedRecordError):
        export_jsonl(reader, temp_dir / "kanjidic.jsonl", show_progress=False)
