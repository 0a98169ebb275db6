#!/usr/bin/env python3
"""
Sequence range and fragment assembly

A SequenceRange holds the bounds of a double-stranded sequence and the
cut ranges registered against it. fragments() walks every index of both
strands once, grouping positions into bins that become the fragments left
after cutting.
"""
import logging
import threading
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Set

from recut.exceptions import (
    SequenceRangeError, CutOutOfRangeError, CutRangeTypeError
)
from recut.models.cut_range import CutRange, VerticalCutRange, HorizontalCutRange, CutRanges
from recut.models.fragment import Fragment, Fragments
from recut.range.calculated_cuts import CalculatedCuts
from recut.utils.sequence import placeholder_sequence

logger = logging.getLogger("recut.range.sequence_range")


@dataclass
class Bin:
    """Positions of each strand collected for one prospective fragment"""
    p: List[int] = field(default_factory=list)
    c: List[int] = field(default_factory=list)

    def is_empty(self) -> bool:
        return not self.p and not self.c


class SequenceRange:
    """Bounds of a double-stranded sequence and the cuts made in it

    Strand bounds may be staggered, e.g. a primary strand spanning 0-9 and
    a complement strand spanning 2-11. Cut coordinates are given in the
    same absolute coordinates as the bounds; fragment indices are offsets
    from ``left``.
    """

    def __init__(self, p_left: Optional[int] = None, p_right: Optional[int] = None,
                 c_left: Optional[int] = None, c_right: Optional[int] = None,
                 circular: bool = False, validate_horizontal_cuts: bool = True):
        """Initialize sequence range

        Args:
            p_left: Left bound of the primary strand
            p_right: Right bound of the primary strand
            c_left: Left bound of the complement strand
            c_right: Right bound of the complement strand
            circular: Whether the sequence is circular
            validate_horizontal_cuts: Check horizontal cuts against the bounds

        Raises:
            SequenceRangeError: If a side has no bound or a strand's left
                bound is greater than its right bound
        """
        bounds = {'p_left': p_left, 'p_right': p_right, 'c_left': c_left, 'c_right': c_right}
        if p_left is None and c_left is None:
            raise SequenceRangeError("At least one of p_left and c_left must be given", bounds)
        if p_right is None and c_right is None:
            raise SequenceRangeError("At least one of p_right and c_right must be given", bounds)
        if p_left is not None and p_right is not None and p_left > p_right:
            raise SequenceRangeError(f"Primary strand left ({p_left}) is greater than right ({p_right})", bounds)
        if c_left is not None and c_right is not None and c_left > c_right:
            raise SequenceRangeError(f"Complement strand left ({c_left}) is greater than right ({c_right})", bounds)

        left = min(b for b in (p_left, c_left) if b is not None)
        right = max(b for b in (p_right, c_right) if b is not None)
        if left > right:
            raise SequenceRangeError(f"Sequence left ({left}) is greater than right ({right})", bounds)

        self._p_left = p_left
        self._p_right = p_right
        self._c_left = c_left
        self._c_right = c_right
        self._left = left
        self._right = right
        self._size = right - left + 1

        self.circular = circular
        self.validate_horizontal_cuts = validate_horizontal_cuts

        self._cut_ranges = CutRanges()
        self._fragments: Optional[Fragments] = None
        self._lock = threading.RLock()

    @property
    def p_left(self) -> Optional[int]:
        return self._p_left

    @property
    def p_right(self) -> Optional[int]:
        return self._p_right

    @property
    def c_left(self) -> Optional[int]:
        return self._c_left

    @property
    def c_right(self) -> Optional[int]:
        return self._c_right

    @property
    def left(self) -> int:
        return self._left

    @property
    def right(self) -> int:
        return self._right

    @property
    def size(self) -> int:
        return self._size

    @property
    def cut_ranges(self) -> CutRanges:
        """Registered cut ranges; register new ones through the add_* methods"""
        return self._cut_ranges

    def __repr__(self) -> str:
        return (f"SequenceRange(p_left={self.p_left}, p_right={self.p_right}, "
                f"c_left={self.c_left}, c_right={self.c_right}, circular={self.circular}, "
                f"cut_ranges={len(self.cut_ranges)})")

    # Cut registration

    def _check_bounds(self, value: Optional[int], name: str) -> None:
        if value is None:
            return
        if not self.left <= value <= self.right:
            raise CutOutOfRangeError(
                f"{name} ({value}) is outside the sequence range {self.left}-{self.right}",
                {name: value, 'left': self.left, 'right': self.right}
            )

    def _validate(self, cut_range) -> CutRange:
        if not isinstance(cut_range, CutRange):
            raise CutRangeTypeError(f"Not of type CutRange: {cut_range!r}")

        if isinstance(cut_range, HorizontalCutRange):
            if self.validate_horizontal_cuts:
                self._check_bounds(cut_range.hc_cut_left, 'hc_cut_left')
                self._check_bounds(cut_range.hc_cut_right, 'hc_cut_right')
        else:
            for name in ('p_cut_left', 'p_cut_right', 'c_cut_left', 'c_cut_right'):
                self._check_bounds(getattr(cut_range, name), name)
        return cut_range

    def _register(self, cut_ranges: List[CutRange]) -> None:
        with self._lock:
            self._cut_ranges.extend(cut_ranges)
            self._fragments = None
        logger.debug(f"Registered {len(cut_ranges)} cut range(s), {len(self._cut_ranges)} total")

    def add_cut_range(self, p_cut_left: Optional[int] = None, p_cut_right: Optional[int] = None,
                      c_cut_left: Optional[int] = None, c_cut_right: Optional[int] = None) -> VerticalCutRange:
        """Cut the backbone of one or both strands

        A cut occurs immediately after the index supplied, so a cut at 0
        falls between positions 0 and 1.

        Args:
            p_cut_left: Primary strand cut (left of the recognition site)
            p_cut_right: Primary strand cut (right of the recognition site)
            c_cut_left: Complement strand cut (left of the recognition site)
            c_cut_right: Complement strand cut (right of the recognition site)

        Returns:
            The registered VerticalCutRange

        Raises:
            CutRangeError: If no coordinate is given or one is not an integer
            CutOutOfRangeError: If a coordinate lies outside [left, right]
        """
        cut_range = VerticalCutRange(p_cut_left, p_cut_right, c_cut_left, c_cut_right)
        self._register([self._validate(cut_range)])
        return cut_range

    def add_cut_range_object(self, cut_range: CutRange) -> CutRange:
        """Register a pre-built cut range

        Raises:
            CutRangeTypeError: If cut_range is not a CutRange
            CutOutOfRangeError: If a coordinate lies outside [left, right]
        """
        self._register([self._validate(cut_range)])
        return cut_range

    def add_cut_ranges(self, *cut_ranges) -> None:
        """Register several cut ranges at once

        Nested lists and tuples are flattened. Every entry is validated
        before any is registered, so a bad entry leaves the collection
        unchanged.
        """
        validated = [self._validate(c) for c in _flatten(cut_ranges)]
        self._register(validated)

    def add_horizontal_cut_range(self, left: int, right: Optional[int] = None) -> HorizontalCutRange:
        """Separate the strands over left..right without cutting either backbone

        Args:
            left: First separated position
            right: Last separated position (defaults to left)

        Returns:
            The registered HorizontalCutRange
        """
        cut_range = HorizontalCutRange(left, right)
        self._register([self._validate(cut_range)])
        return cut_range

    # Fragment assembly

    def fragments(self) -> Fragments:
        """Fragments left after applying every registered cut

        Bins left empty by a cut after the final position are not emitted.
        The result is cached until another cut range is registered.
        """
        with self._lock:
            if self._fragments is None:
                self._fragments = self._calculate_fragments()
            return self._fragments

    def _calculate_fragments(self) -> Fragments:
        num_txt = placeholder_sequence(self.size)
        fragments = Fragments(num_txt, num_txt)

        cut_ranges = self.cut_ranges if self.left == 0 else self.cut_ranges.shifted(-self.left)

        cc = CalculatedCuts(self.size, circular=self.circular)
        cc.add_cuts_from_cut_ranges(cut_ranges)
        cc.remove_incomplete_cuts()

        bins = self.create_bins(cc)
        for bin_id in sorted(bins):
            current = bins[bin_id]
            # A cut after the final position opens a bin that never fills
            if current.is_empty():
                continue
            fragments.append(Fragment(current.p, current.c))

        logger.debug(f"Calculated {len(fragments)} fragment(s) from {len(self.cut_ranges)} cut range(s)")
        return fragments

    def create_bins(self, cc: CalculatedCuts) -> Dict[int, Bin]:
        """Assign every position of both strands to a bin

        Example return value for a 6 nt linear sequence::

            {0: Bin(p=[0, 1], c=[0, 1, 2, 3]),
             2: Bin(p=[2, 3, 4, 5], c=[4, 5])}

        Args:
            cc: CalculatedCuts with incomplete cuts already removed

        Returns:
            Dictionary of bin id to Bin, ids ascending from left to right
        """
        p_cut = cc.vc_primary
        c_cut = cc.vc_complement
        h_cut = set(cc.hc_between_strands)

        if self.circular:
            # Origin stays at position 0; the tails are joined after the scan
            unique_id = 0
        else:
            # Bin -1 marks the start of both strands in case there is a
            # horizontal cut at position 0
            if -1 not in p_cut:
                p_cut.insert(0, -1)
            if -1 not in c_cut:
                c_cut.insert(0, -1)
            unique_id = -1
        first_index = unique_id

        p_cuts = set(p_cut)
        c_cuts = set(c_cut)

        p_bin_id = c_bin_id = unique_id
        bins = {unique_id: Bin()}
        merges = 0

        for idx in range(first_index, self.size):
            # bin ids are out of sync but the strands are still attached
            if p_bin_id != c_bin_id and idx not in h_cut:
                min_id, max_id = sorted((p_bin_id, c_bin_id))
                del bins[max_id]
                p_bin_id = c_bin_id = min_id
                merges += 1

            bins[p_bin_id].p.append(idx)
            bins[c_bin_id].c.append(idx)

            if idx in p_cuts:
                unique_id += 1
                p_bin_id = unique_id
                bins[p_bin_id] = Bin()

            if idx in c_cuts:
                unique_id += 1
                c_bin_id = unique_id
                bins[c_bin_id] = Bin()

        if self.circular:
            self._join_across_origin(bins, p_bin_id, c_bin_id, p_cuts, c_cuts)
        else:
            del bins[-1]

        logger.debug(f"Created {len(bins)} bin(s) with {merges} strand merge(s)")
        return bins

    def _join_across_origin(self, bins: Dict[int, Bin], p_bin_id: int, c_bin_id: int,
                            p_cuts: Set[int], c_cuts: Set[int]) -> None:
        """Fold the bins holding uncut strand tails into bin 0

        Tail positions are placed ahead of bin 0's so each strand list
        keeps its 5'->3' order across the origin.
        """
        last_index = self.size - 1
        tails = set()
        if last_index not in p_cuts:
            tails.add(p_bin_id)
        if last_index not in c_cuts:
            tails.add(c_bin_id)
        tails.discard(0)

        head = bins[0]
        for bin_id in sorted(tails):
            tail = bins.pop(bin_id)
            head.p = tail.p + head.p
            head.c = tail.c + head.c


def _flatten(items: Iterable) -> List:
    flat = []
    for item in items:
        if isinstance(item, (list, tuple)):
            flat.extend(_flatten(item))
        else:
            flat.append(item)
    return flat
