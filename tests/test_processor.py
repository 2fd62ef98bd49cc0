from __future__ import annotations

import asyncio
from datetime import datetime, timezone
from typing import Optional

from core.config import NotificationConfig
from core.engine import SecurityEngine
from core.models import MessageContext, Verdict
from core.processor import MessageProcessor


class FakeNotifier:
    def __init__(self) -> None:
        self.sent: list[tuple[MessageContext, Verdict, str]] = []

    async def send(self, context: MessageContext, verdict: Verdict, subject: str) -> None:
        self.sent.append((context, verdict, subject))


def _make_context(
    *, source_key: str = "@group", text: str = "", file_name: Optional[str] = None
) -> MessageContext:
    return MessageContext(
        source_key=source_key,
        chat_id=123,
        message_id=1,
        date=datetime(2024, 1, 1, tzinfo=timezone.utc),
        text=text,
        file_name=file_name,
        permalink=None,
    )


def _processor(
    notifier: FakeNotifier, allowed_sources: set[str], alert_on_safe: bool = False
) -> MessageProcessor:
    return MessageProcessor(
        engine=SecurityEngine(),
        notifier=notifier,
        allowed_sources=allowed_sources,
        notification_config=NotificationConfig(alert_on_safe=alert_on_safe),
    )


def test_dangerous_link_is_notified_with_offending_url() -> None:
    notifier = FakeNotifier()
    processor = _processor(notifier, {"@group"})

    verdicts = asyncio.run(processor.handle(_make_context(text="claim http://airdrop.example now")))

    assert verdicts == [
        Verdict(dangerous=True, reason="Malicious keyword detected in URL", value="http://airdrop.example")
    ]
    assert len(notifier.sent) == 1
    _, verdict, subject = notifier.sent[0]
    assert verdict.dangerous
    assert subject == "http://airdrop.example"


def test_attachment_and_text_are_both_classified() -> None:
    notifier = FakeNotifier()
    processor = _processor(notifier, set())

    verdicts = asyncio.run(
        processor.handle(_make_context(text="see attached", file_name="setup.exe"))
    )

    assert verdicts is not None
    assert [v.reason for v in verdicts] == [
        "Executable (.exe) files are blocked",
        "No links found",
    ]
    assert [subject for _, _, subject in notifier.sent] == ["setup.exe"]


def test_safe_messages_are_silent_by_default() -> None:
    notifier = FakeNotifier()
    processor = _processor(notifier, set())

    asyncio.run(processor.handle(_make_context(text="docs at https://example.org")))

    assert not notifier.sent


def test_alert_on_safe_notifies_every_verdict() -> None:
    notifier = FakeNotifier()
    processor = _processor(notifier, set(), alert_on_safe=True)

    asyncio.run(processor.handle(_make_context(text="docs at https://example.org")))

    assert [verdict.reason for _, verdict, _ in notifier.sent] == ["Message is safe"]


def test_untracked_sources_are_skipped() -> None:
    notifier = FakeNotifier()
    processor = _processor(notifier, {"@other"})

    result = asyncio.run(processor.handle(_make_context(text="http://crack.example")))

    assert result is None
    assert not notifier.sent


def test_empty_messages_are_skipped() -> None:
    notifier = FakeNotifier()
    processor = _processor(notifier, set())

    assert asyncio.run(processor.handle(_make_context(text="   "))) is None
    assert not notifier.sent
