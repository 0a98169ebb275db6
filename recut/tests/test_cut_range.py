#!/usr/bin/env python3
"""
Tests for cut range models
"""
import dataclasses

import pytest

from recut.exceptions import CutRangeError, CutRangeTypeError
from recut.models.cut_range import CutRange, VerticalCutRange, HorizontalCutRange, CutRanges


class TestVerticalCutRange:

    def test_coordinates(self):
        cut = VerticalCutRange(3, None, 1, 8)
        assert cut.coordinates() == [3, 1, 8]
        assert cut.min == 1
        assert cut.max == 8
        assert cut.range == range(1, 9)

    def test_include(self):
        cut = VerticalCutRange(2, None, 4)
        assert cut.include(2)
        assert 3 in cut
        assert 4 in cut
        assert 5 not in cut
        assert not cut.include(1)

    def test_requires_a_coordinate(self):
        with pytest.raises(CutRangeError):
            VerticalCutRange()
        with pytest.raises(ValueError):
            VerticalCutRange(None, None, None, None)

    def test_integer_coordinates_only(self):
        with pytest.raises(CutRangeError) as exc_info:
            VerticalCutRange(2.0)
        assert exc_info.value.details == {'p_cut_left': 2.0}
        with pytest.raises(CutRangeError):
            VerticalCutRange(1, None, False)

    def test_shifted(self):
        cut = VerticalCutRange(12, None, 14)
        moved = cut.shifted(-10)
        assert moved == VerticalCutRange(2, None, 4)
        assert cut.p_cut_left == 12

    def test_immutable(self):
        cut = VerticalCutRange(1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            cut.p_cut_left = 2

    def test_is_cut_range(self):
        assert isinstance(VerticalCutRange(1), CutRange)


class TestHorizontalCutRange:

    def test_single_position(self):
        cut = HorizontalCutRange(3)
        assert cut.hc_cut_left == 3
        assert cut.hc_cut_right == 3
        assert cut.range == range(3, 4)

    def test_strand_coordinates_undefined(self):
        cut = HorizontalCutRange(1, 4)
        assert cut.p_cut_left is None
        assert cut.c_cut_right is None
        assert (cut.min, cut.max) == (1, 4)

    def test_inverted_range(self):
        with pytest.raises(CutRangeError) as exc_info:
            HorizontalCutRange(4, 2)
        assert exc_info.value.details == {'left': 4, 'right': 2}

    def test_integer_coordinates_only(self):
        with pytest.raises(CutRangeError):
            HorizontalCutRange(1, 2.5)
        with pytest.raises(CutRangeError):
            HorizontalCutRange("1")

    def test_shifted(self):
        assert HorizontalCutRange(10, 12).shifted(-10) == HorizontalCutRange(0, 2)


class TestCutRanges:

    def test_only_cut_ranges_accepted(self):
        cuts = CutRanges()
        with pytest.raises(CutRangeTypeError):
            cuts.append((1, 2))
        with pytest.raises(TypeError):
            cuts.insert(0, "1,2")
        with pytest.raises(CutRangeTypeError):
            cuts += [VerticalCutRange(1), 5]
        assert len(cuts) == 0

    def test_extend_checks_every_entry_first(self):
        cuts = CutRanges([VerticalCutRange(1)])
        with pytest.raises(CutRangeTypeError):
            cuts.extend([VerticalCutRange(2), None])
        assert cuts == [VerticalCutRange(1)]

    def test_setitem(self):
        cuts = CutRanges([VerticalCutRange(1)])
        cuts[0] = HorizontalCutRange(2)
        assert cuts[0] == HorizontalCutRange(2)
        with pytest.raises(CutRangeTypeError):
            cuts[0] = 3

    def test_envelope(self):
        cuts = CutRanges([VerticalCutRange(4, None, 6), HorizontalCutRange(1, 2)])
        assert cuts.min == 1
        assert cuts.max == 6
        assert cuts.include(5)
        assert not cuts.include(3)

    def test_empty_envelope(self):
        cuts = CutRanges()
        assert cuts.min is None
        assert cuts.max is None
        assert not cuts.include(0)

    def test_shifted_returns_new_collection(self):
        cuts = CutRanges([VerticalCutRange(11, None, 13), HorizontalCutRange(10, 15)])
        moved = cuts.shifted(-10)
        assert isinstance(moved, CutRanges)
        assert list(moved) == [VerticalCutRange(1, None, 3), HorizontalCutRange(0, 5)]
        assert cuts[0] == VerticalCutRange(11, None, 13)
