"""Tests for FileLineSource random access."""

import pytest

from kanjidic.source import FileLineSource


class TestFileLineSource:
    """Byte-offset line index over a file."""

    def test_length(self, sample_file, sample_lines):
        """len() is the number of lines, header included."""
        with FileLineSource(sample_file) as source:
            assert len(source) == len(sample_lines)

    def test_random_access(self, sample_file, sample_lines):
        """Lines can be read in any order, as raw bytes without newline."""
        with FileLineSource(sample_file) as source:
            assert source[4] == sample_lines[4].encode('euc-jp')
            assert source[0] == sample_lines[0].encode('euc-jp')
            assert source[5] == sample_lines[5].encode('euc-jp')
            assert source[1] == sample_lines[1].encode('euc-jp')

    def test_offsets(self, temp_dir):
        """Offsets point at each line start."""
        path = temp_dir / "lines"
        path.write_bytes(b"ab\ncde\n\nf")

        source = FileLineSource(path)
        assert source.line_offsets == [0, 3, 7, 8]
        assert source[3] == b"f"
        assert source[2] == b""
        source.close()

    def test_crlf(self, temp_dir):
        """Windows line endings are stripped."""
        path = temp_dir / "lines"
        path.write_bytes(b"# KANJIDIC\r\nabc\r\n")

        with FileLineSource(path) as source:
            assert source[1] == b"abc"

    def test_out_of_range(self, sample_file):
        """Bad indices raise IndexError."""
        with FileLineSource(sample_file) as source:
            with pytest.raises(IndexError):
                source[len(source)]
            with pytest.raises(IndexError):
                source[-1]

    def test_missing_file(self, temp_dir):
        """A missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            FileLineSource(temp_dir / "missing")

    def test_reopens_after_close(self, sample_file, sample_lines):
        """Reading after close() opens the file again."""
        source = FileLineSource(sample_file)
        source[1]
        source.close()
        assert source[2] == sample_lines[2].encode('euc-jp')
        source.close()
