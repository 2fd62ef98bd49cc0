"""Core message processing pipeline.

This module is integration-agnostic. It only relies on the engine and a
notifier port, enabling other frontends or adapters without changes here.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from core.config import NotificationConfig
from core.engine import SecurityEngine
from core.models import MessageContext, Verdict
from core.ports import NotifierPort

LOGGER = logging.getLogger(__name__)


class MessageProcessor:
    """Orchestrates classification and notifications for one message."""

    def __init__(
        self,
        engine: SecurityEngine,
        notifier: NotifierPort,
        allowed_sources: Iterable[str],
        notification_config: NotificationConfig,
    ) -> None:
        self._engine = engine
        self._notifier = notifier
        # An empty allow-list means every chat is inspected.
        self._allowed_sources = set(allowed_sources)
        self._notifications = notification_config

    def classify(self, context: MessageContext) -> list[tuple[Verdict, str]]:
        """Return (verdict, subject) pairs for the attachment and the text."""

        results: list[tuple[Verdict, str]] = []
        if context.file_name:
            results.append((self._engine.analyze_file({"name": context.file_name}), context.file_name))
        if context.text.strip():
            verdict = self._engine.analyze_message(context.text)
            results.append((verdict, verdict.value or ""))
        return results

    async def handle(self, context: MessageContext) -> Optional[list[Verdict]]:
        """Process one message context through the pipeline."""

        if self._allowed_sources and context.source_key not in self._allowed_sources:
            return None

        # Media without captions or file names has nothing to classify.
        if not context.text.strip() and not context.file_name:
            return None

        verdicts: list[Verdict] = []
        for verdict, subject in self.classify(context):
            verdicts.append(verdict)
            if not verdict.dangerous and not self._notifications.alert_on_safe:
                continue
            await self._notifier.send(context, verdict, subject)
            if verdict.dangerous:
                LOGGER.info(
                    "Dangerous content in %s (message %s): %s",
                    context.source_key,
                    context.message_id,
                    verdict.reason,
                )
        return verdicts
