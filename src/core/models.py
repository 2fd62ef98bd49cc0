"""Core domain models.

These dataclasses are shared across the core and adapters to avoid tight
coupling to any integration-specific types.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional, Union

KEYWORD_SOURCE = "keyword"
CORPUS_SOURCE = "corpus"


@dataclass(frozen=True)
class Verdict:
    """Result of a single classification call."""

    dangerous: bool
    reason: str
    value: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"dangerous": self.dangerous, "reason": self.reason}
        if self.value is not None:
            payload["value"] = self.value
        return payload


@dataclass(frozen=True)
class MatchResult:
    """Outcome of the keyword/corpus lookup for one normalized candidate."""

    matched: bool
    source: Optional[str] = None
    indicator: Optional[str] = None


NO_MATCH = MatchResult(matched=False)


@dataclass(frozen=True)
class LoadOutcome:
    """Outcome of a known-bad corpus load."""

    ok: bool
    entries: int
    error: Optional[str] = None


@dataclass(frozen=True)
class FileDescriptor:
    """A file name plus whatever metadata the caller has about it."""

    name: Optional[str]
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class LinkTarget:
    url: Optional[str]


@dataclass(frozen=True)
class FileTarget:
    file: Any


@dataclass(frozen=True)
class MessageTarget:
    text: Optional[str]


AnalysisTarget = Union[LinkTarget, FileTarget, MessageTarget]


@dataclass(frozen=True)
class MessageContext:
    """Minimal incoming message context used by the processing pipeline."""

    source_key: str
    chat_id: int
    message_id: int
    date: datetime
    text: str
    file_name: Optional[str]
    permalink: Optional[str]
