"""Pytest configuration for the nzlit test suite."""

import sys
from pathlib import Path

import pytest

# Make the in-tree package importable without an install
sys.path.insert(0, str(Path(__file__).parent.parent))

from nzlit.semantics.typesys import catalog_for  # noqa: E402


@pytest.fixture
def catalog():
    """Catalog with 64-bit pointers, independent of the host."""
    return catalog_for(64)


@pytest.fixture
def isolated_cwd(tmp_path, monkeypatch):
    """Run in an empty directory so no nzlit.toml is picked up."""
    monkeypatch.chdir(tmp_path)
    return tmp_path
