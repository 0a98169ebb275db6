#!/usr/bin/env python3
"""
Sequence utilities for recut
Placeholder strands, complements and cut specification parsing
"""
from typing import Optional, Tuple

from Bio.Seq import Seq

from recut.exceptions import ValidationError

NUMBERING = '0123456789'


def placeholder_sequence(size: int) -> str:
    """Build a stand-in strand of the given length

    Positions are labelled with the last digit of their index, which keeps
    displays readable when no real sequence is available.

    Args:
        size: Strand length

    Returns:
        String of length size, e.g. '0123456789012' for 13
    """
    if size is None or size <= 0:
        return ''
    repeats = -(-size // len(NUMBERING))
    return (NUMBERING * repeats)[:size]


def complement_sequence(sequence: str) -> str:
    """Base-by-base complement of a nucleotide sequence, not reversed

    Args:
        sequence: Primary strand sequence

    Returns:
        Complement strand, aligned to the primary strand
    """
    return str(Seq(sequence).complement())


def _parse_coordinate(value: str, spec: str) -> Optional[int]:
    value = value.strip()
    if not value:
        return None
    try:
        return int(value)
    except ValueError:
        raise ValidationError(f"Invalid cut coordinate '{value}' in '{spec}'") from None


def parse_cut_spec(spec: str) -> Tuple[Optional[int], Optional[int], Optional[int], Optional[int]]:
    """Parse a vertical cut specification

    Format is "p_left[,p_right[,c_left[,c_right]]]" where empty fields
    are left undefined, so "1,,3" cuts the primary strand after 1 and the
    complement strand after 3.

    Args:
        spec: Cut specification string

    Returns:
        Tuple of (p_cut_left, p_cut_right, c_cut_left, c_cut_right)

    Raises:
        ValidationError: If the specification is malformed
    """
    parts = spec.split(',')
    if len(parts) > 4:
        raise ValidationError(f"Too many fields in cut specification '{spec}'")

    coords = [_parse_coordinate(part, spec) for part in parts]
    coords += [None] * (4 - len(coords))
    if all(c is None for c in coords):
        raise ValidationError(f"Empty cut specification '{spec}'")

    return tuple(coords)


def parse_hcut_spec(spec: str) -> Tuple[int, int]:
    """Parse a horizontal cut specification, "left" or "left-right"

    Args:
        spec: Horizontal cut specification string

    Returns:
        Tuple of (left, right)

    Raises:
        ValidationError: If the specification is malformed
    """
    left_str, sep, right_str = spec.strip().partition('-')
    left = _parse_coordinate(left_str, spec)
    right = _parse_coordinate(right_str, spec) if sep else left
    if left is None or right is None:
        raise ValidationError(f"Invalid horizontal cut specification '{spec}'")
    return left, right
