#!/usr/bin/env python3
"""
recut - fragment assembly for cut double-stranded sequences

A Python library for modelling vertical (backbone) and horizontal
(inter-strand) cuts on a double-stranded sequence and deriving the
resulting fragments.
"""

__version__ = '0.1.0'
__author__ = 'recut Team'
__email__ = 'example@example.org'
__license__ = 'MIT'

# Import core modules for easier access
from .exceptions import RecutError
from .error_handlers import handle_exceptions
from .models.cut_range import CutRange, VerticalCutRange, HorizontalCutRange, CutRanges
from .models.fragment import Fragment, Fragments
from .range.calculated_cuts import CalculatedCuts
from .range.sequence_range import SequenceRange

# Make key classes available at package level
__all__ = [
    'RecutError', 'handle_exceptions',
    'CutRange', 'VerticalCutRange', 'HorizontalCutRange', 'CutRanges',
    'Fragment', 'Fragments', 'CalculatedCuts', 'SequenceRange',
]
