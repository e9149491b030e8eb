"""Pytest configuration and fixtures for Duratio tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add the parent directory to sys.path so duratio can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture
def full_duration():
    """1 year, 2 months, 3 days, 4 hours, 5 minutes and 6 seconds."""
    from duratio import Duration

    return Duration(37_090_998)
