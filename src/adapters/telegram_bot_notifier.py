"""Telegram Bot API alert adapter.

Uses the Bot API for delivery so alerts can be routed via a bot chat.
"""

from __future__ import annotations

import asyncio
import json
import urllib.error
import urllib.request

from adapters.notification_formatting import format_notification
from core.models import MessageContext, Verdict


class TelegramBotNotifier:
    """Notifier adapter that sends alerts via the Telegram Bot API."""

    def __init__(self, bot_token: str, chat_id: str, source_aliases: dict[str, str]) -> None:
        self._bot_token = bot_token
        self._chat_id = chat_id
        self._source_aliases = source_aliases

    def _endpoint(self) -> str:
        return f"https://api.telegram.org/bot{self._bot_token}/sendMessage"

    def build_payload(self, context: MessageContext, verdict: Verdict, subject: str) -> dict:
        message = format_notification(verdict, context, subject, self._source_aliases, mode="html")
        return {
            "chat_id": self._chat_id,
            "text": message,
            "parse_mode": "HTML",
            "disable_web_page_preview": True,
        }

    def _post(self, payload: dict) -> None:
        data = json.dumps(payload).encode("utf-8")
        request = urllib.request.Request(self._endpoint(), data=data, method="POST")
        request.add_header("Content-Type", "application/json")
        try:
            with urllib.request.urlopen(request, timeout=10):
                pass
        except urllib.error.HTTPError as e:
            body = e.read().decode("utf-8", errors="replace")
            raise RuntimeError(f"Bot API error {e.code}: {body}") from e

    async def send(self, context: MessageContext, verdict: Verdict, subject: str) -> None:
        """Send the formatted alert via the Bot API."""

        await asyncio.to_thread(self._post, self.build_payload(context, verdict, subject))
