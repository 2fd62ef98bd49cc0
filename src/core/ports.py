"""Ports (interfaces) used by the core.

Ports define the minimal contracts for corpus sources and notification
adapters so that the core can be reused with different backends.
"""

from __future__ import annotations

from typing import Protocol

from core.models import MessageContext, Verdict


class CorpusSourceError(RuntimeError):
    """Raised by corpus sources when the known-bad list cannot be fetched."""


class CorpusSource(Protocol):
    """Supplies the raw known-bad corpus text, one indicator per line."""

    async def fetch_text(self) -> str:
        ...


class NotifierPort(Protocol):
    """Notification operations required by the message processor."""

    async def send(self, context: MessageContext, verdict: Verdict, subject: str) -> None:
        ...
