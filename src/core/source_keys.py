"""Helpers for working with tripwire source keys.

A source key is either "@username" or "chat_id:<id>". Telegram reports the
same chat under several numeric forms, so configured chat ids are expanded
to every equivalent variant before filtering.
"""

from __future__ import annotations

from typing import Optional

CHAT_ID_PREFIX = "chat_id:"
CHANNEL_PEER_PREFIX = "-100"


def _expand_chat_id_variants(raw_chat_id: int) -> set[int]:
    """Return equivalent chat id variants (peer id, chat id, channel id)."""

    variants: set[int] = {raw_chat_id}
    if raw_chat_id < 0:
        raw_text = str(raw_chat_id)
        if raw_text.startswith(CHANNEL_PEER_PREFIX):
            channel_part = raw_text[len(CHANNEL_PEER_PREFIX):]
            if channel_part.isdigit():
                variants.add(int(channel_part))
        else:
            variants.add(abs(raw_chat_id))
        return variants

    variants.add(-raw_chat_id)
    variants.add(-1000000000000 - raw_chat_id)
    return variants


def parse_chat_id(source_key: str) -> Optional[int]:
    """Return the numeric id of a chat_id source key, or None."""

    if not source_key.startswith(CHAT_ID_PREFIX):
        return None
    try:
        return int(source_key[len(CHAT_ID_PREFIX):])
    except ValueError:
        return None


def normalize_source_key(source_key: str) -> str:
    """Lower-case usernames; chat ids are left untouched."""

    source_key = source_key.strip()
    if source_key.startswith("@"):
        return source_key.lower()
    return source_key


def expand_source_key_variants(source_key: str) -> set[str]:
    """Expand a source key to include equivalent chat_id variants."""

    source_key = normalize_source_key(source_key)
    raw_chat_id = parse_chat_id(source_key)
    if raw_chat_id is None:
        return {source_key}
    return {f"{CHAT_ID_PREFIX}{variant}" for variant in _expand_chat_id_variants(raw_chat_id)}
