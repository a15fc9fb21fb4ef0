"""
Pytest configuration for fitment tester tests.

Puts src/ on the Python path so the generator modules import without
installation, and provides the small grid used across the test suite.
"""

import sys
from dataclasses import replace
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent
SRC_DIR = PROJECT_ROOT / "src"

if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))


@pytest.fixture
def compact():
    """Two sizes, three deltas, 18mm pitch, 10mm plate, 12mm margin."""
    from config import FitmentConfig

    return replace(
        FitmentConfig(),
        hole_sizes=(6, 10),
        hole_size_labels=("6mm", "10mm"),
        size_deltas=(-0.2, 0.0, 0.2),
    )
