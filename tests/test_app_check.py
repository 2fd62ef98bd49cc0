from __future__ import annotations

import pytest

from app import check
from core.engine import SecurityEngine


def test_check_dispatches_each_kind() -> None:
    engine = SecurityEngine()
    assert check("link", "http://virus.example", engine).dangerous is True
    assert check("file", "setup.exe", engine).reason == "Executable (.exe) files are blocked"
    assert check("message", "no links here", engine).reason == "No links found"


def test_check_rejects_unknown_kind() -> None:
    with pytest.raises(ValueError):
        check("email", "x", SecurityEngine())
