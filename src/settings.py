"""Static configuration for tripwire.

All user-editable settings (keywords, corpus source, watched chats,
notifications, logging) live in a single JSON file for quick edits without
touching Python.
"""

import json
import os
from typing import Optional

from core.config import CorpusConfig, NotificationConfig
from core.source_keys import expand_source_key_variants

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))

# TRIPWIRE_CONFIG lets the same install run against several config files.
CONFIG_PATH = os.getenv("TRIPWIRE_CONFIG") or os.path.join(PROJECT_ROOT, "config.json")


def _load_json_config() -> dict:
    """Load config.json with a flat, user-friendly schema."""

    if not os.path.exists(CONFIG_PATH):
        raise FileNotFoundError(f"Config file not found: {CONFIG_PATH}")

    with open(CONFIG_PATH, "r", encoding="utf-8") as handle:
        return json.load(handle)


def _normalize_sources(raw_sources: list[dict]) -> tuple[set[str], dict[str, str]]:
    """Normalize sources and build an alias map keyed by source_key."""

    sources: set[str] = set()
    aliases: dict[str, str] = {}
    for entry in raw_sources:
        source_key = entry.get("source_key")
        if not source_key:
            continue
        if not entry.get("enabled", True):
            continue
        expanded_keys = expand_source_key_variants(source_key)
        sources.update(expanded_keys)
        alias = entry.get("alias")
        if alias:
            # Mirror aliases onto equivalent chat_id forms to avoid mismatches.
            for key in expanded_keys:
                aliases.setdefault(key, alias)
    return sources, aliases


def normalize_keywords_config(raw_keywords) -> Optional[list[str]]:
    """Validate the optional keyword override.

    A bare string is treated as a single keyword; iterating it would turn
    every character into its own rule.
    """

    if raw_keywords is None:
        return None
    if isinstance(raw_keywords, str):
        return [raw_keywords]
    if not isinstance(raw_keywords, list) or not all(isinstance(k, str) for k in raw_keywords):
        raise ValueError("config.json 'keywords' must be null, a string, or a list of strings")
    return raw_keywords


_CONFIG = _load_json_config()

# Expose the raw config for modules that need structured access.
CONFIG = _CONFIG

# None keeps the compiled-in keyword rules; a list replaces them.
KEYWORDS = normalize_keywords_config(_CONFIG.get("keywords"))

# Telethon session file name, relative to the project root.
SESSION_NAME = _CONFIG.get("telegram", {}).get("session_name", "tripwire")

# Known-bad corpus source. Leaving both url and path empty runs keyword-only.
_corpus = _CONFIG.get("corpus", {})
CORPUS = CorpusConfig(
    url=_corpus.get("url") or None,
    path=_corpus.get("path") or None,
    timeout_seconds=float(_corpus.get("timeout_seconds", 10)),
)

# Watched chats. An empty list inspects every incoming message.
SOURCES, SOURCE_ALIASES = _normalize_sources(_CONFIG.get("sources", []))

_notifications = _CONFIG.get("notifications", {})
# Notification method switches adapters without changing core logic.
NOTIFICATION_METHOD = _notifications.get("notification_method", "saved_messages")
# Bot chat id is only required when notification_method=bot.
BOT_CHAT_ID = _notifications.get("bot_chat_id")
NOTIFICATIONS = NotificationConfig(
    alert_on_safe=bool(_notifications.get("alert_on_safe", False)),
)

# Logging configuration (optional).
LOGGING = _CONFIG.get("logging", {})
