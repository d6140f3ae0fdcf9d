from __future__ import annotations

from pathlib import Path

import pytest

from structdoc import extractors
from tests._fixtures.repo_builder import RepoBuilder


@pytest.fixture
def repo_builder(tmp_path: Path) -> RepoBuilder:
    """Provide a reusable workspace builder rooted at the pytest tmp_path."""
    return RepoBuilder(tmp_path)


@pytest.fixture(autouse=True)
def _fresh_extractor_registry():
    extractors.reset_registry()
    yield
    extractors.reset_registry()
