"""Pytest configuration and fixtures for all tests."""

import sys
from pathlib import Path

import pytest

# Add tests directory to Python path so testing_utils can be imported
tests_dir = Path(__file__).parent
if str(tests_dir) not in sys.path:
    sys.path.insert(0, str(tests_dir))

from swapnet import create_default_registry


@pytest.fixture
def registry():
    """A fresh frozen registry with the four built-in model types."""
    return create_default_registry()


@pytest.fixture
def data_dir():
    """Directory holding the case files."""
    return tests_dir / "data"
