# tests/conftest.py
# This file is part of Seqex - Sequence Expression Matching
#
# Test configuration and shared fixtures for pytest

"""Test configuration and shared fixtures for Seqex tests.

The configuration handles:
- Python path setup for module imports
- Test environment initialization
- Common fixtures for matchers and token files
"""

import sys
import pytest
from pathlib import Path

# Ensure project modules can be imported
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Verify that the project packages are importable.

    Raises:
        pytest.skip: If required modules cannot be imported
    """
    try:
        import core
        import notation
        import utils
    except ImportError as e:
        pytest.skip(f"Cannot import required modules: {e}")

    yield


@pytest.fixture
def is_even():
    """Predicate matcher accepting runs of even integers."""
    from core import predicate

    return predicate(lambda token: token % 2 == 0)


@pytest.fixture
def is_odd():
    """Predicate matcher accepting runs of odd integers."""
    from core import predicate

    return predicate(lambda token: token % 2 == 1)


@pytest.fixture
def write_token_file(tmp_path):
    """Write CSV token files into a temporary directory.

    Returns:
        Callable taking the file content and an optional file name
    """

    def _write(content: str, name: str = "tokens.csv") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write
