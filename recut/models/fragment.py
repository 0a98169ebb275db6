#!/usr/bin/env python3
"""
Fragment models

A Fragment holds the indices each strand contributes to one physically
contiguous piece of a cut sequence. Fragments collects them in left to
right order together with the strand strings they index into.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

import pandas as pd


@dataclass
class DisplayFragment:
    """Printable view of a fragment, strands aligned column by column"""
    primary: str = ''
    complement: str = ''
    p_left: Optional[int] = None
    p_right: Optional[int] = None
    c_left: Optional[int] = None
    c_right: Optional[int] = None


@dataclass
class Fragment:
    """One contiguous piece of a cut double-stranded sequence"""
    primary: List[int] = field(default_factory=list)
    complement: List[int] = field(default_factory=list)

    @property
    def size(self) -> int:
        """Number of distinct positions covered by either strand"""
        return len(set(self.primary) | set(self.complement))

    def is_empty(self) -> bool:
        return not self.primary and not self.complement

    def alignment(self) -> Tuple[int, int, int]:
        """Column offsets of the two strands when drawn side by side

        Each strand list is a contiguous walk along the sequence, so the
        strand starting later begins at the column where its first index
        appears in the other strand. This also lines up fragments that
        wrap around the origin of a circular sequence.

        Returns:
            Tuple of (primary offset, complement offset, total width)
        """
        p, c = self.primary, self.complement
        if not p or not c:
            return 0, 0, len(p) + len(c)

        if c[0] in p:
            p_offset, c_offset = 0, p.index(c[0])
        elif p[0] in c:
            p_offset, c_offset = c.index(p[0]), 0
        else:
            # Strands do not overlap; keep sequence order
            first, last = min(p[0], c[0]), max(p[-1], c[-1])
            return p[0] - first, c[0] - first, last - first + 1

        width = max(p_offset + len(p), c_offset + len(c))
        return p_offset, c_offset, width

    def for_display(self, p_str: str, c_str: str) -> DisplayFragment:
        """Render the fragment against the given primary and complement strings

        Args:
            p_str: Primary strand sequence
            c_str: Complement strand sequence (same orientation as p_str)

        Returns:
            DisplayFragment with blanks where a strand is absent
        """
        p_offset, c_offset, width = self.alignment()

        p_chars = [' '] * width
        for column, idx in enumerate(self.primary, start=p_offset):
            p_chars[column] = p_str[idx]
        c_chars = [' '] * width
        for column, idx in enumerate(self.complement, start=c_offset):
            c_chars[column] = c_str[idx]

        df = DisplayFragment(primary=''.join(p_chars), complement=''.join(c_chars))
        if self.primary:
            df.p_left, df.p_right = self.primary[0], self.primary[-1]
        if self.complement:
            df.c_left, df.c_right = self.complement[0], self.complement[-1]
        return df


class Fragments(list):
    """Ordered fragments produced from one pair of strands"""

    COLUMNS = ['fragment', 'p_left', 'p_right', 'c_left', 'c_right', 'primary', 'complement']

    def __init__(self, primary: str, complement: str, fragments=()):
        super().__init__(fragments)
        self.primary = primary
        self.complement = complement

    def for_display(self, p_str: Optional[str] = None, c_str: Optional[str] = None) -> List[DisplayFragment]:
        """Display every fragment, defaulting to the strands this collection was built for"""
        p_str = self.primary if p_str is None else p_str
        c_str = self.complement if c_str is None else c_str
        return [fragment.for_display(p_str, c_str) for fragment in self]

    def to_records(self, p_str: Optional[str] = None, c_str: Optional[str] = None) -> List[Dict[str, Any]]:
        """Convert to a list of dictionaries, one per fragment"""
        records = []
        for number, display in enumerate(self.for_display(p_str, c_str), start=1):
            records.append({
                'fragment': number,
                'p_left': display.p_left,
                'p_right': display.p_right,
                'c_left': display.c_left,
                'c_right': display.c_right,
                'primary': display.primary,
                'complement': display.complement,
            })
        return records

    def to_dataframe(self, p_str: Optional[str] = None, c_str: Optional[str] = None) -> pd.DataFrame:
        """Tabulate the fragments, one row per fragment"""
        return pd.DataFrame(self.to_records(p_str, c_str), columns=self.COLUMNS)
