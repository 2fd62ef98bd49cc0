"""Compiled-in keyword rules (core domain)."""

from __future__ import annotations

from typing import Iterable, Optional, Tuple

DEFAULT_KEYWORDS: Tuple[str, ...] = (
    "free-money",
    "crypto",
    "wallet",
    "airdrop",
    "hack",
    "keygen",
    "crack",
    "stealer",
    "trojan",
    "virus",
    "malware",
    "login",
    "verify",
    "update-now",
    "secure-now",
)


def normalize_indicator(raw: str) -> str:
    """Trim and lower-case a keyword or corpus entry."""

    return raw.strip().lower()


def normalize_indicators(raw_values: Iterable[str]) -> Tuple[str, ...]:
    """Normalize values, dropping blanks and keeping first-seen order."""

    normalized = (normalize_indicator(value) for value in raw_values)
    return tuple(value for value in normalized if value)


def build_keyword_rules(keywords: Optional[Iterable[str]] = None) -> Tuple[str, ...]:
    """Return the keyword rules used by the match engine.

    Configured keywords replace the defaults entirely. Duplicates are dropped
    so the rule list stays small, but the original order is kept because the
    first matching keyword is reported back to callers.
    """

    source = DEFAULT_KEYWORDS if keywords is None else keywords
    rules: list[str] = []
    for keyword in normalize_indicators(source):
        if keyword not in rules:
            rules.append(keyword)
    return tuple(rules)
