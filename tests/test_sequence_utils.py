#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
GenoWeaver v0.1.0

Tests for sliding-window sequence search utilities.

Author: GenoWeaver Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

import pytest
from genoweaver.errors import ConfigurationError
from genoweaver.utils.sequence_utils import (
    iter_windows,
    locate_pattern,
    count_occurrences,
    contains_pattern,
)


class TestWindows:
    """Test window iteration."""

    def test_basic_windows(self):
        """Test extraction of windows from a sequence."""
        windows = list(iter_windows("0123", 3))

        assert windows == [('0', '1', '2'), ('1', '2', '3')]

    def test_window_larger_than_sequence(self):
        """Test handling when size > sequence length."""
        assert list(iter_windows("01", 3)) == []


class TestLocatePattern:
    """Test first-match search."""

    def test_locate_first_match(self):
        """Test that the first occurrence is returned."""
        assert locate_pattern("11010122", "0101") == 2

    def test_locate_from_start(self):
        """Test that matches before ``start`` are ignored."""
        assert locate_pattern("01010101", "0101", start=1) == 2

    def test_locate_no_match(self):
        """Test missing pattern."""
        assert locate_pattern("2222", "0101") is None

    def test_locate_pattern_longer_than_sequence(self):
        """Test pattern longer than the sequence."""
        assert locate_pattern("01", "0101") is None

    def test_empty_pattern_rejected(self):
        """Test that an empty pattern is a configuration error."""
        with pytest.raises(ConfigurationError):
            locate_pattern("0101", "")


class TestCountOccurrences:
    """Test overlapping occurrence counting."""

    def test_overlapping_count(self):
        """Test that overlapping occurrences are all counted."""
        assert count_occurrences("1111", "11") == 3

    def test_count_non_sequence_types(self):
        """Test counting over lists of ints."""
        assert count_occurrences([1, 2, 1, 2, 1], [1, 2, 1]) == 2

    def test_count_zero(self):
        """Test sequence without occurrences."""
        assert count_occurrences("0000", "1") == 0

    def test_contains(self):
        """Test presence check."""
        assert contains_pattern("11032023", "0320")
        assert not contains_pattern("11032023", "1022")

# GenoWeaver v0.1.0
# Any usage is subject to this software's license.
