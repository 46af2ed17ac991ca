"""
Test configuration: make the project root importable and provide a throwaway database.
"""
from __future__ import annotations

import sys
from pathlib import Path

import pytest


def _ensure_repo_root_on_path() -> None:
    here = Path(__file__).resolve()
    repo_root = here.parent.parent
    if str(repo_root) not in sys.path:
        sys.path.insert(0, str(repo_root))


_ensure_repo_root_on_path()


@pytest.fixture
def temp_db(tmp_path, monkeypatch):
    """Point the data layer at a fresh sqlite file under tmp_path."""
    from home_address import config

    db_path = tmp_path / "nested" / "home_address.db"
    monkeypatch.setattr(config, "SETTINGS", config.Settings(db_path=db_path))
    return db_path
