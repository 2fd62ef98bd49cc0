from __future__ import annotations

from core.source_keys import expand_source_key_variants, normalize_source_key, parse_chat_id


def test_usernames_are_lowercased_and_not_expanded() -> None:
    assert normalize_source_key(" @Group ") == "@group"
    assert expand_source_key_variants("@Group") == {"@group"}


def test_parse_chat_id() -> None:
    assert parse_chat_id("chat_id:-100123") == -100123
    assert parse_chat_id("chat_id:abc") is None
    assert parse_chat_id("@group") is None


def test_expand_chat_id_variants_positive() -> None:
    variants = expand_source_key_variants("chat_id:123")
    assert "chat_id:123" in variants
    assert "chat_id:-123" in variants
    assert "chat_id:-1000000000123" in variants


def test_expand_chat_id_variants_negative_100() -> None:
    variants = expand_source_key_variants("chat_id:-100987654321")
    assert "chat_id:-100987654321" in variants
    assert "chat_id:987654321" in variants


def test_invalid_chat_id_is_kept_verbatim() -> None:
    assert expand_source_key_variants("chat_id:abc") == {"chat_id:abc"}
