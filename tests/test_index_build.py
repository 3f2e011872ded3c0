"""Tests for the character -> line trie index."""

import marisa_trie

from kanjidic.index_build import TrieIndex, build_index
from kanjidic.reader import KanjidicReader, open_kanjidic


def test_build_index_maps_lines(sample_file, temp_dir):
    """Each kanji maps to its line number."""
    trie_path = temp_dir / "kanjidic.trie"
    with open_kanjidic(sample_file) as reader:
        trie = build_index(reader, trie_path, show_progress=False)

    assert trie_path.exists()
    assert len(trie) == 5
    assert trie["林"] == [(3,)]

    loaded = marisa_trie.RecordTrie('<I')
    loaded.load(str(trie_path))
    assert loaded["日"] == [(5,)]


def test_trie_index_is_order_independent(sample_file, temp_dir):
    """Indexed lookups find kanji behind the scan offset."""
    trie_path = temp_dir / "kanjidic.trie"
    with open_kanjidic(sample_file) as reader:
        build_index(reader, trie_path, show_progress=False)

    with open_kanjidic(sample_file) as reader:
        index = TrieIndex(trie_path, reader)
        assert index.get("日").character == "日"
        assert index.get("一").character == "一"
        assert index.line_of("木") == 2
        assert "森" in index
        assert len(index) == 5


def test_trie_index_miss(sample_file, temp_dir):
    """Unknown kanji give None."""
    trie_path = temp_dir / "kanjidic.trie"
    with open_kanjidic(sample_file) as reader:
        build_index(reader, trie_path, show_progress=False)
        index = TrieIndex(trie_path, reader)

        assert index.line_of("犬") is None
        assert index.get("犬") is None
        assert "犬" not in index


def test_duplicate_character_keeps_first_line(temp_dir):
    """A kanji listed twice resolves to its first line."""
    lines = ["# KANJIDIC", "木 4C7A U6728 G1", "林 4E53 U6797 G1", "木 4C7A U6728 G2"]
    trie_path = temp_dir / "dup.trie"
    reader = KanjidicReader(lines)
    build_index(reader, trie_path, show_progress=False)

    index = TrieIndex(trie_path, KanjidicReader(lines))
    assert index.line_of("木") == 1
    assert index.get("木").grade == 1
