from __future__ import annotations

from datetime import datetime, timezone

from telethon.tl.types import PeerChannel, PeerUser

from adapters.telegram_mapper import build_context


class DummyChat:
    def __init__(self, username: "str | None" = None) -> None:
        self.username = username


class DummyFile:
    def __init__(self, name: "str | None") -> None:
        self.name = name


class DummyMessage:
    def __init__(
        self,
        *,
        chat_id: int,
        message_id: int,
        text: "str | None",
        chat: "DummyChat | None" = None,
        peer_id=None,
        file: "DummyFile | None" = None,
    ) -> None:
        self.chat_id = chat_id
        self.id = message_id
        self.raw_text = text
        self.chat = chat
        self.peer_id = peer_id
        self.file = file
        self.date = datetime(2024, 1, 1, tzinfo=timezone.utc)


def test_build_context_for_public_chat_with_attachment() -> None:
    message = DummyMessage(
        chat_id=-100123,
        message_id=10,
        text="look http://example.org",
        chat=DummyChat(username="SomeGroup"),
        peer_id=PeerChannel(channel_id=123),
        file=DummyFile("Setup.EXE"),
    )
    context = build_context(message)
    assert context.source_key == "@somegroup"
    assert context.file_name == "Setup.EXE"
    assert context.permalink == "https://t.me/SomeGroup/10"
    assert context.text == "look http://example.org"


def test_build_context_for_private_channel_without_file() -> None:
    message = DummyMessage(
        chat_id=-100123,
        message_id=11,
        text=None,
        chat=DummyChat(username=None),
        peer_id=PeerChannel(channel_id=123),
    )
    context = build_context(message)
    assert context.source_key == "chat_id:-100123"
    assert context.file_name is None
    assert context.text == ""
    assert context.permalink == "https://t.me/c/123/11"


def test_build_context_for_direct_message_has_no_permalink() -> None:
    message = DummyMessage(
        chat_id=555,
        message_id=3,
        text="hi",
        peer_id=PeerUser(user_id=555),
        file=DummyFile(None),
    )
    context = build_context(message)
    assert context.source_key == "chat_id:555"
    assert context.permalink is None
    assert context.file_name is None
