"""Pytest fixtures for graphql-scaffold tests."""

from pathlib import Path

import pytest


@pytest.fixture
def project_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Empty Rails-like project root; GRAPHQL_SCAFFOLD_CONFIG unset so the local config file is used."""
    monkeypatch.delenv("GRAPHQL_SCAFFOLD_CONFIG", raising=False)
    (tmp_path / "app" / "graphql").mkdir(parents=True)
    return tmp_path
