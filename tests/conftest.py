from __future__ import annotations

import sys
from pathlib import Path

import pytest

# make roster_api importable without installing the package
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from fastapi.testclient import TestClient  # noqa: E402

from roster_api.core import config as core_config  # noqa: E402


@pytest.fixture()
def data_dir(tmp_path, monkeypatch):
    """Point both collections at a temporary directory and reset cached settings."""
    monkeypatch.setenv("DATA_DIR", str(tmp_path))
    monkeypatch.setenv("STORAGE_BACKEND", "json")
    monkeypatch.delenv("TEAMS_FILE", raising=False)
    monkeypatch.delenv("PLAYERS_FILE", raising=False)
    core_config.get_settings.cache_clear()
    yield tmp_path
    core_config.get_settings.cache_clear()


@pytest.fixture()
def client(data_dir):
    from roster_api.app import create_app

    with TestClient(create_app()) as test_client:
        yield test_client
