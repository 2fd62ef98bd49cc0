from __future__ import annotations

import os

import pytest

import settings
from get_session import build_client, session_path


def test_relative_session_name_lives_under_project_root() -> None:
    assert session_path("tripwire") == os.path.join(settings.PROJECT_ROOT, "tripwire")


def test_absolute_session_path_is_kept(tmp_path) -> None:
    path = str(tmp_path / "watcher")
    assert session_path(path) == path


def test_build_client_requires_credentials(monkeypatch) -> None:
    monkeypatch.setenv("API_ID", "")
    monkeypatch.setenv("API_HASH", "")
    with pytest.raises(RuntimeError, match="API_ID or API_HASH"):
        build_client()
