#!/usr/bin/env python3
"""
Raw cut positions derived from a collection of cut ranges.

CalculatedCuts turns cut ranges into three index lists:

* vc_primary -- indices after which the primary backbone is severed
* vc_complement -- the same for the complement strand
* hc_between_strands -- indices where the strands are no longer bonded

remove_incomplete_cuts() then drops anything that cannot produce a
fragment on its own, e.g. a nick on one strand with nothing separating the
strands next to it.
"""
import logging
from typing import Iterable, List, Optional, Set, Tuple

from recut.exceptions import CalculatedCutsError, ValidationError
from recut.models.cut_range import CutRange, VerticalCutRange, HorizontalCutRange
from recut.utils.sequence import placeholder_sequence

logger = logging.getLogger("recut.range.calculated_cuts")


class CalculatedCuts:
    """Per-strand cut positions for a sequence of a given size"""

    def __init__(self, size: Optional[int] = None, circular: bool = False):
        """Initialize empty cut lists

        Args:
            size: Length of the sequence the cuts apply to
            circular: Whether the sequence is circular
        """
        self.size = size
        self.circular = circular
        self.vc_primary: List[int] = []
        self.vc_complement: List[int] = []
        self.hc_between_strands: List[int] = []
        self._strands_for_display = None

    def add_cuts_from_cut_ranges(self, cut_ranges: Iterable[CutRange]) -> None:
        """Collect cut positions from cut ranges

        Vertical cuts contribute their strand coordinates; a staggered
        vertical cut also separates the strands over its overhang.
        Horizontal cuts only separate the strands.

        Args:
            cut_ranges: Iterable of CutRange objects
        """
        self._strands_for_display = None

        for cut_range in cut_ranges:
            self.vc_primary.extend([cut_range.p_cut_left, cut_range.p_cut_right])
            self.vc_complement.extend([cut_range.c_cut_left, cut_range.c_cut_right])

            if isinstance(cut_range, VerticalCutRange):
                for low, high in self._overhangs(cut_range):
                    self.hc_between_strands.extend(range(low + 1, high + 1))
            elif isinstance(cut_range, HorizontalCutRange):
                self.hc_between_strands.extend(range(cut_range.hc_cut_left, cut_range.hc_cut_right + 1))

        self._clean_all()
        logger.debug(f"Collected {len(self.vc_primary)} primary, {len(self.vc_complement)} complement "
                     f"and {len(self.hc_between_strands)} between-strand cut positions")

    @staticmethod
    def _overhangs(cut_range: VerticalCutRange) -> List[Tuple[int, int]]:
        """Pairs of (primary, complement) cut positions bounding single-stranded overhangs"""
        p_cuts = sorted(c for c in (cut_range.p_cut_left, cut_range.p_cut_right) if c is not None)
        c_cuts = sorted(c for c in (cut_range.c_cut_left, cut_range.c_cut_right) if c is not None)

        if not p_cuts or not c_cuts:
            return []

        if len(p_cuts) == len(c_cuts):
            pairs = zip(p_cuts, c_cuts)
        else:
            # Unbalanced cut, fall back to the envelope
            pairs = [(cut_range.min, cut_range.max)]

        return [tuple(sorted(pair)) for pair in pairs if pair[0] != pair[1]]

    def _previous_index(self, idx: int) -> int:
        if self.circular:
            return (idx - 1) % self.size
        return idx - 1

    def _next_index(self, idx: int) -> int:
        if self.circular:
            return (idx + 1) % self.size
        return idx + 1

    def _ordered_hcuts(self) -> List[int]:
        hcuts = sorted(set(self.hc_between_strands))
        if self.circular and hcuts and len(hcuts) < self.size:
            # Start on a run boundary so runs crossing the origin stay whole
            members = set(hcuts)
            start = next(i for i, h in enumerate(hcuts) if self._previous_index(h) not in members)
            hcuts = hcuts[start:] + hcuts[:start]
        return hcuts

    def remove_incomplete_cuts(self, size: Optional[int] = None) -> None:
        """Drop cuts that do not fully separate a piece of the sequence

        A run of strand-separated indices is kept only when vertical cuts
        bound it on both sides. A vertical cut is kept only when the other
        strand is cut at the same index or a kept run ends at it or starts
        right after it.

        Args:
            size: Sequence size, if not given at initialization

        Raises:
            CalculatedCutsError: If no size is known or a horizontal cut
                lies outside the sequence
        """
        self._strands_for_display = None
        if size is not None:
            self.size = size
        if not isinstance(self.size, int):
            raise CalculatedCutsError("Size of the strand must be provided here or during initialization")

        last_index = self.size - 1
        vcuts: Set[int] = set(self.vc_primary) | set(self.vc_complement)
        if not self.circular:
            # Strand ends behave as cuts
            vcuts.update((-1, last_index))

        good_hcuts: List[int] = []
        potential_hcuts: List[int] = []

        for hcut in self._ordered_hcuts():
            if hcut < -1 or hcut > last_index:
                raise CalculatedCutsError(f"Horizontal cut at {hcut} is outside the sequence",
                                          {'hcut': hcut, 'size': self.size})

            # skipped a position
            if potential_hcuts and self._next_index(potential_hcuts[-1]) != hcut:
                potential_hcuts = []

            if not potential_hcuts:
                if hcut in vcuts and self._previous_index(hcut) in vcuts:
                    good_hcuts.append(hcut)
                elif self._previous_index(hcut) in vcuts:
                    potential_hcuts.append(hcut)
            elif hcut in vcuts:
                good_hcuts.extend(potential_hcuts)
                good_hcuts.append(hcut)
                potential_hcuts = []
            else:
                potential_hcuts.append(hcut)

        good = set(good_hcuts)
        primary = set(self.vc_primary)
        complement = set(self.vc_complement)

        def is_complete(vcut: int, opposing: Set[int]) -> bool:
            return vcut in opposing or vcut in good or self._next_index(vcut) in good

        removed = len(primary) + len(complement)
        self.vc_primary = [v for v in self.vc_primary if is_complete(v, complement)]
        self.vc_complement = [v for v in self.vc_complement if is_complete(v, primary)]
        self.hc_between_strands = sorted(good)
        removed -= len(self.vc_primary) + len(self.vc_complement)

        if removed:
            logger.debug(f"Removed {removed} incomplete vertical cuts")

    def _clean_all(self) -> None:
        self.vc_primary = sorted({c for c in self.vc_primary if c is not None})
        self.vc_complement = sorted({c for c in self.vc_complement if c is not None})
        self.hc_between_strands = sorted({c for c in self.hc_between_strands if c is not None})

    def strands_for_display(self, str1: Optional[str] = None, str2: Optional[str] = None,
                            vcp: Optional[Iterable[int]] = None, vcc: Optional[Iterable[int]] = None,
                            hc: Optional[Iterable[int]] = None,
                            vc_symbol: str = '|', hc_symbol: str = '-') -> List[str]:
        """Render both strands with their cuts as three aligned rows

        Example for a 6 nt sequence cut after 1 on the primary strand and
        after 3 on the complement strand::

            0 1 | 2 3   4 5
                  - -
            0 1   2 3 | 4 5

        Args:
            str1: Primary strand (placeholder numbering by default)
            str2: Complement strand (placeholder numbering by default)
            vcp: Primary cut positions (defaults to vc_primary)
            vcc: Complement cut positions (defaults to vc_complement)
            hc: Between-strand cut positions (defaults to hc_between_strands)
            vc_symbol: Symbol marking a vertical cut
            hc_symbol: Symbol marking a horizontal cut

        Returns:
            List of [primary row, between-strands row, complement row]
        """
        key = (str1, str2,
               None if vcp is None else tuple(vcp),
               None if vcc is None else tuple(vcc),
               None if hc is None else tuple(hc),
               vc_symbol, hc_symbol)
        if self._strands_for_display is not None and self._strands_for_display[0] == key:
            return list(self._strands_for_display[1])

        a = placeholder_sequence(self.size) if str1 is None else str1
        b = placeholder_sequence(self.size) if str2 is None else str2
        if len(a) != len(b):
            raise ValidationError(f"Strand lengths differ: {len(a)} and {len(b)}")

        vcp = set(self.vc_primary if vcp is None else vcp)
        vcc = set(self.vc_complement if vcc is None else vcc)
        hc = set(self.hc_between_strands if hc is None else hc)

        top, middle, bottom = [], [], []
        for idx in range(-1, len(a)):
            if idx >= 0:
                top.append(a[idx])
                middle.append(hc_symbol if idx in hc else ' ')
                bottom.append(b[idx])
            if idx in vcp or idx in vcc:
                top.append(vc_symbol if idx in vcp else ' ')
                middle.append(' ')
                bottom.append(vc_symbol if idx in vcc else ' ')

        rows = [' '.join(top), ' '.join(middle), ' '.join(bottom)]
        self._strands_for_display = (key, rows)
        return list(rows)
