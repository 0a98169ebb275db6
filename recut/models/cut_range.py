#!/usr/bin/env python3
"""
Cut range models

A cut range describes where one cut falls on a double-stranded sequence.
Vertical cuts sever the backbone of a strand immediately after the given
index, so a cut at 0 falls between indices 0 and 1. Horizontal cuts break
the bonds between the strands over a closed index range without severing
either backbone.
"""
from dataclasses import dataclass
from typing import Iterable, List, Optional

from recut.exceptions import CutRangeError, CutRangeTypeError


def _check_coordinate(name: str, value, optional: bool = False) -> None:
    if value is None and optional:
        return
    # bool is an int subclass but never a position
    if not isinstance(value, int) or isinstance(value, bool):
        raise CutRangeError(f"{name} must be an integer index, got {value!r}", {name: value})


class CutRange:
    """Common interface shared by vertical and horizontal cut ranges"""

    p_cut_left: Optional[int] = None
    p_cut_right: Optional[int] = None
    c_cut_left: Optional[int] = None
    c_cut_right: Optional[int] = None

    def coordinates(self) -> List[int]:
        """Defined coordinates of this cut, in declaration order"""
        raise NotImplementedError("Subclasses must implement coordinates")

    def shifted(self, offset: int) -> 'CutRange':
        """Return a copy of this cut with every coordinate moved by offset"""
        raise NotImplementedError("Subclasses must implement shifted")

    @property
    def min(self) -> Optional[int]:
        coords = self.coordinates()
        return min(coords) if coords else None

    @property
    def max(self) -> Optional[int]:
        coords = self.coordinates()
        return max(coords) if coords else None

    @property
    def range(self) -> Optional[range]:
        if self.min is None or self.max is None:
            return None
        return range(self.min, self.max + 1)

    def include(self, i: int) -> bool:
        """Check whether index i falls within the envelope of this cut"""
        return self.range is not None and i in self.range

    def __contains__(self, i: int) -> bool:
        return self.include(i)


@dataclass(frozen=True)
class VerticalCutRange(CutRange):
    """Cut severing the primary and/or complement backbone

    Left and right cut pairs model enzymes that cut on both sides of their
    recognition site. Staggered cuts (primary and complement cut at
    different indices) leave single-stranded overhangs.
    """
    p_cut_left: Optional[int] = None
    p_cut_right: Optional[int] = None
    c_cut_left: Optional[int] = None
    c_cut_right: Optional[int] = None

    def __post_init__(self):
        for name in ('p_cut_left', 'p_cut_right', 'c_cut_left', 'c_cut_right'):
            _check_coordinate(name, getattr(self, name), optional=True)
        if not self.coordinates():
            raise CutRangeError("A vertical cut range needs at least one coordinate")

    def coordinates(self) -> List[int]:
        return [c for c in (self.p_cut_left, self.p_cut_right, self.c_cut_left, self.c_cut_right)
                if c is not None]

    def shifted(self, offset: int) -> 'VerticalCutRange':
        def move(value):
            return None if value is None else value + offset

        return VerticalCutRange(move(self.p_cut_left), move(self.p_cut_right),
                                move(self.c_cut_left), move(self.c_cut_right))


@dataclass(frozen=True)
class HorizontalCutRange(CutRange):
    """Break in the bonding between strands over hc_cut_left..hc_cut_right"""
    hc_cut_left: int
    hc_cut_right: Optional[int] = None

    def __post_init__(self):
        _check_coordinate('hc_cut_left', self.hc_cut_left)
        if self.hc_cut_right is None:
            object.__setattr__(self, 'hc_cut_right', self.hc_cut_left)
        _check_coordinate('hc_cut_right', self.hc_cut_right)
        if self.hc_cut_left > self.hc_cut_right:
            raise CutRangeError(
                f"Horizontal cut left ({self.hc_cut_left}) is greater than right ({self.hc_cut_right})",
                {'left': self.hc_cut_left, 'right': self.hc_cut_right}
            )

    def coordinates(self) -> List[int]:
        return [self.hc_cut_left, self.hc_cut_right]

    def shifted(self, offset: int) -> 'HorizontalCutRange':
        return HorizontalCutRange(self.hc_cut_left + offset, self.hc_cut_right + offset)


class CutRanges(list):
    """Ordered collection that only accepts CutRange entries"""

    def __init__(self, cut_ranges: Iterable[CutRange] = ()):
        super().__init__()
        self.extend(cut_ranges)

    @staticmethod
    def _check(cut_range) -> CutRange:
        if not isinstance(cut_range, CutRange):
            raise CutRangeTypeError(f"Not of type CutRange: {cut_range!r}")
        return cut_range

    def append(self, cut_range: CutRange) -> None:
        super().append(self._check(cut_range))

    def insert(self, index: int, cut_range: CutRange) -> None:
        super().insert(index, self._check(cut_range))

    def extend(self, cut_ranges: Iterable[CutRange]) -> None:
        # Check everything before touching the list
        checked = [self._check(c) for c in cut_ranges]
        super().extend(checked)

    def __iadd__(self, cut_ranges: Iterable[CutRange]) -> 'CutRanges':
        self.extend(cut_ranges)
        return self

    def __setitem__(self, index, value):
        if isinstance(index, slice):
            value = [self._check(c) for c in value]
        else:
            value = self._check(value)
        super().__setitem__(index, value)

    @property
    def min(self) -> Optional[int]:
        values = [c.min for c in self if c.min is not None]
        return min(values) if values else None

    @property
    def max(self) -> Optional[int]:
        values = [c.max for c in self if c.max is not None]
        return max(values) if values else None

    def include(self, i: int) -> bool:
        """Check whether any cut range includes index i"""
        return any(c.include(i) for c in self)

    def shifted(self, offset: int) -> 'CutRanges':
        """Copy of the collection with every cut moved by offset"""
        return CutRanges(c.shifted(offset) for c in self)
