"""Tests for the kdlookup command."""

import orjson

from kanjidic.cli.lookup import main, split_characters
from kanjidic.index_build import build_index
from kanjidic.reader import open_kanjidic


def _records(out):
    return [orjson.loads(line) for line in out.splitlines() if line]


def test_split_characters():
    """Arguments split into unique characters in order."""
    assert split_characters(["木林", "森", "木"]) == ["木", "林", "森"]


def test_lookup_prints_json(sample_file, capsys):
    """Found kanji are printed one JSON object per line."""
    status = main(["木", "森", "--input", str(sample_file)])

    assert status == 0
    records = _records(capsys.readouterr().out)
    assert [r["character"] for r in records] == ["木", "森"]
    assert records[0]["katakana"] == ["ボク", "モク"]


def test_lookup_full_output(sample_file, capsys):
    """--full keeps absent fields."""
    main(["木", "--input", str(sample_file), "--full"])
    record = _records(capsys.readouterr().out)[0]
    assert record["skip"] is None
    assert record["korean"] == []


def test_lookup_out_of_order_from_cache(sample_file, capsys):
    """A kanji behind the scan offset is served from the cache the scan filled."""
    status = main(["日", "木", "--input", str(sample_file)])
    captured = capsys.readouterr()

    assert status == 0
    assert [r["character"] for r in _records(captured.out)] == ["日", "木"]


def test_lookup_reports_missing(sample_file, capsys):
    """Missing kanji are reported on stderr with exit status 1."""
    status = main(["犬", "木", "--input", str(sample_file)])
    captured = capsys.readouterr()

    assert status == 1
    assert "Not found: 犬" in captured.err


def test_lookup_preload(sample_file, capsys):
    """--preload reads the whole file first."""
    status = main(["日一", "--input", str(sample_file), "--preload"])
    assert status == 0
    assert [r["character"] for r in _records(capsys.readouterr().out)] == ["日", "一"]


def test_lookup_with_index(sample_file, temp_dir, capsys):
    """--index uses a prebuilt trie."""
    trie_path = temp_dir / "kanjidic.trie"
    with open_kanjidic(sample_file) as reader:
        build_index(reader, trie_path, show_progress=False)

    status = main(["森", "一", "--input", str(sample_file), "--index", str(trie_path)])
    assert status == 0
    assert [r["character"] for r in _records(capsys.readouterr().out)] == ["森", "一"]


def test_lookup_joyo_file(sample_file, temp_dir, capsys):
    """--joyo-file replaces the marker set."""
    joyo = temp_dir / "joyo.txt"
    joyo.write_text("林\n", encoding='utf-8')

    main(["木林", "--input", str(sample_file), "--joyo-file", str(joyo)])
    records = _records(capsys.readouterr().out)
    assert records[0]["joyo"] is False
    assert records[1]["joyo"] is True


def test_lookup_missing_file(temp_dir):
    """A missing dictionary file exits with status 1."""
    assert main(["木", "--input", str(temp_dir / "nope")]) == 1


def test_lookup_missing_index(sample_file, temp_dir, capsys):
    """A missing --index file exits with status 1 and prints nothing."""
    status = main(["木", "--input", str(sample_file), "--index", str(temp_dir / "nope.trie")])
    assert status == 1
    assert capsys.readouterr().out == ""
