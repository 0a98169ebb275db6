#!/usr/bin/env python3
"""
Test configuration and fixtures for recut tests
"""

import os
import sys
from pathlib import Path

import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from recut.range.sequence_range import SequenceRange


@pytest.fixture
def linear_range():
    """Six position linear sequence, both strands spanning 0-5"""
    return SequenceRange(0, 5, 0, 5)


@pytest.fixture
def circular_range():
    """Six position circular sequence"""
    return SequenceRange(0, 5, 0, 5, circular=True)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove any RECUT_ overrides from the environment"""
    for key in list(os.environ):
        if key.startswith("RECUT_"):
            monkeypatch.delenv(key)
    return monkeypatch
