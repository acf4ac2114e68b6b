"""
Tests for smartvercmp.versioning.segments.

Tests segment tokenizing including:
- Leading digit run measurement
- Separator detection
- Fully numeric remainders
"""

from __future__ import annotations

import pytest

from smartvercmp.versioning import is_separator, parse_segment


class TestParseSegment:
    """Tests for parse_segment."""

    def test_mixed_segment_then_separator(self):
        """Test a digit run with a letter suffix before a dot."""
        assert parse_segment("11b.4.16-New_Year_Edition") == (2, 3, 4)

    def test_fully_numeric(self):
        """Test that an all-digit string is consumed whole."""
        assert parse_segment("2000") == (4, 4, 4)
        assert parse_segment("7") == (1, 1, 1)

    def test_numeric_then_separator(self):
        """Test a plain numeric segment followed by a dot."""
        assert parse_segment("16.3.2") == (2, 2, 3)

    def test_no_separator(self):
        """Test that a segment without a separator runs to the end."""
        assert parse_segment("98SP1") == (2, 5, 5)
        assert parse_segment("SE") == (0, 2, 2)

    def test_leading_separator(self):
        """Test that a separator at index 0 yields an empty segment."""
        assert parse_segment(".5") == (0, 0, 1)

    def test_letters_only_before_separator(self):
        """Test a segment with no digit run."""
        assert parse_segment("New_Year") == (0, 3, 4)

    def test_space_is_part_of_segment(self):
        """Test that spaces do not split segments."""
        assert parse_segment("7 SP1") == (1, 5, 5)

    def test_non_ascii_digits_not_counted(self):
        """Test that only ASCII 0-9 count as digits."""
        assert parse_segment("٣.1") == (0, 1, 2)

    def test_empty_string_rejected(self):
        """Test that an empty string is rejected."""
        with pytest.raises(ValueError):
            parse_segment("")


class TestIsSeparator:
    """Tests for is_separator."""

    @pytest.mark.parametrize("ch", list("!\"#$%&'()*+,-./:;<=>?@[\\]^_`{|}~"))
    def test_punctuation(self, ch):
        """Test that every ASCII punctuation character separates."""
        assert is_separator(ch)

    @pytest.mark.parametrize("ch", ["0", "9", "A", "Z", "a", "z", " ", "\t", "é"])
    def test_non_punctuation(self, ch):
        """Test that alphanumerics, whitespace and non-ASCII do not."""
        assert not is_separator(ch)
