"""Pytest configuration and fixtures for isoline-mapper tests."""

import sys
from pathlib import Path

import pytest

# Add src directory to path for imports
src_path = Path(__file__).parent.parent / 'src'
sys.path.insert(0, str(src_path))


@pytest.fixture
def peak_grid():
    """Single interior peak; values >= 2.5 form one 4-connected region."""
    return [
        [0, 0, 0, 0],
        [0, 5, 5, 0],
        [0, 5, 10, 5],
        [0, 0, 5, 0],
    ]


@pytest.fixture
def two_peaks_grid():
    """Two separate peaks on a 7x5 grid."""
    return [
        [0, 0, 0, 0, 0, 0, 0],
        [0, 8, 0, 0, 0, 6, 0],
        [0, 0, 0, 0, 0, 0, 0],
        [0, 0, 0, 0, 0, 0, 0],
        [0, 0, 0, 0, 0, 0, 0],
    ]
