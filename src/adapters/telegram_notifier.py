"""Telegram alert adapter for Saved Messages.

Formats a human-readable Markdown alert and sends it to Saved Messages.
"""

from __future__ import annotations

from adapters.notification_formatting import format_notification
from core.models import MessageContext, Verdict


class TelegramSavedMessagesNotifier:
    """Notifier adapter that sends alerts to the user's Saved Messages."""

    def __init__(self, client, source_aliases: dict[str, str]) -> None:
        self._client = client
        self._source_aliases = source_aliases

    async def send(self, context: MessageContext, verdict: Verdict, subject: str) -> None:
        """Send the formatted alert to Saved Messages."""

        message = format_notification(verdict, context, subject, self._source_aliases, mode="markdown")
        await self._client.send_message("me", message, parse_mode="Markdown", link_preview=False)
