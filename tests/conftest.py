# tests/conftest.py

"""Shared pytest fixtures for all tests."""

from collections.abc import Generator
from pathlib import Path
from unittest.mock import patch

import pytest

from src.config.settings import Settings


@pytest.fixture(autouse=True)
def isolated_paths(tmp_path: Path) -> Generator[None, None, None]:
    """Point the store at a temp file and use the built-in catalog."""
    with patch.object(Settings, "STORE_PATH", tmp_path / "store.json"), \
            patch.object(Settings, "CATALOG_PATH", None):
        yield
