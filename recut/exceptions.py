#!/usr/bin/env python3
"""
Exception hierarchy for recut.
All custom exceptions should inherit from RecutError.

Domain errors also derive from the matching built-in exception so callers
can catch either ``CutOutOfRangeError`` or a plain ``IndexError``.
"""
from typing import Dict, Any, Optional


class RecutError(Exception):
    """Base exception for all recut errors"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        """Initialize with error message and optional details

        Args:
            message: Error message
            details: Optional details dictionary with context
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)


class ConfigurationError(RecutError):
    """Error related to configuration issues"""
    pass


class ValidationError(RecutError):
    """Data validation error"""
    pass


class SequenceRangeError(ValidationError, ValueError):
    """Invalid strand bounds when building a SequenceRange"""
    pass


class CutRangeError(ValidationError, ValueError):
    """Malformed cut range coordinates"""
    pass


class CutOutOfRangeError(ValidationError, IndexError):
    """Cut coordinate outside the bounds of its sequence range"""
    pass


class CutRangeTypeError(ValidationError, TypeError):
    """Value registered as a cut range is not a CutRange"""
    pass


class CalculatedCutsError(RecutError, IndexError):
    """Cut positions cannot be resolved against the sequence size"""
    pass
