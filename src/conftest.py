"""
Pytest Configuration
====================

Automatically loaded by pytest. Adds src/ to sys.path so solid_math is
importable without installation, and provides shared solid fixtures.

Usage:
    cd src
    pytest tests/ -v
"""

import sys
from pathlib import Path

import pytest

# At module level so the solid_math import below resolves without installation
src_root = Path(__file__).parent
if str(src_root) not in sys.path:
    sys.path.insert(0, str(src_root))

from solid_math.builders import SOLIDS  # noqa: E402


@pytest.fixture(params=sorted(SOLIDS))
def solid_name(request):
    """Every registered solid name."""
    return request.param


@pytest.fixture
def solid(solid_name):
    """(name, Shape) for every registered solid."""
    return solid_name, SOLIDS[solid_name]()
