from __future__ import annotations

import pytest

import settings
from core.engine import SecurityEngine


def test_missing_keywords_keep_defaults() -> None:
    assert settings.normalize_keywords_config(None) is None


def test_string_keywords_become_a_single_rule() -> None:
    keywords = settings.normalize_keywords_config("phish")
    assert keywords == ["phish"]

    engine = SecurityEngine(keywords=keywords)
    assert engine.keywords == ("phish",)
    assert engine.analyze_link("http://example.org").dangerous is False


def test_keyword_list_is_kept() -> None:
    assert settings.normalize_keywords_config(["a-b", "c-d"]) == ["a-b", "c-d"]


@pytest.mark.parametrize("raw", [{"phish": True}, 42, ["ok", 3]])
def test_invalid_keywords_are_rejected(raw) -> None:
    with pytest.raises(ValueError):
        settings.normalize_keywords_config(raw)
