"""
Data models for recut: cut ranges and fragments.
"""
from .cut_range import CutRange, VerticalCutRange, HorizontalCutRange, CutRanges
from .fragment import Fragment, DisplayFragment, Fragments

__all__ = [
    'CutRange', 'VerticalCutRange', 'HorizontalCutRange', 'CutRanges',
    'Fragment', 'DisplayFragment', 'Fragments',
]
