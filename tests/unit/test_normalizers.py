"""
Unit tests for text normalization.
"""

import pytest

from scholartext.normalizers import collapse_blank_lines, count_words, normalize_text


class TestNormalizeText:
    """Test normalize_text()."""

    def test_empty(self):
        """Empty input stays empty."""
        assert normalize_text("") == ""

    def test_collapses_horizontal_space(self):
        """Runs of spaces and tabs become one space."""
        assert normalize_text("a  \t b") == "a b"

    def test_keeps_line_structure(self):
        """Single newlines survive."""
        assert normalize_text("1. Introduction\nBody") == "1. Introduction\nBody"

    def test_strips_line_edges(self):
        """Spaces around newlines are removed."""
        assert normalize_text("line one   \n   line two") == "line one\nline two"

    def test_carriage_returns(self):
        """Windows and old Mac line endings become \\n."""
        assert normalize_text("a\r\nb\rc") == "a\nb\nc"

    def test_control_characters_removed(self):
        """Control characters are stripped."""
        assert normalize_text("a\x00b\x07c\x1fd") == "abcd"

    def test_blank_lines_collapsed(self):
        """At most one blank line remains between paragraphs."""
        assert normalize_text("a\n\n\n\n\nb") == "a\n\nb"

    def test_whitespace_only_lines(self):
        """Lines holding only spaces count as blank."""
        assert normalize_text("a\n   \n \n\nb") == "a\n\nb"


class TestHelpers:
    """Test helper functions."""

    def test_collapse_blank_lines(self):
        """Only 3+ newlines are touched."""
        assert collapse_blank_lines("a\n\nb\n\n\nc") == "a\n\nb\n\nc"

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("", 0),
            ("one", 1),
            ("one two  three", 3),
            ("line\nbreak\n\npara", 3),
        ],
    )
    def test_count_words(self, text, expected):
        """Words are whitespace-delimited tokens."""
        assert count_words(text) == expected
