"""
Sequence ranges and the cut calculations used to fragment them.
"""
from .calculated_cuts import CalculatedCuts
from .sequence_range import SequenceRange, Bin

__all__ = ['CalculatedCuts', 'SequenceRange', 'Bin']
