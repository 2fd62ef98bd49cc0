"""Application entry point for tripwire."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Optional

from art import tprint
from dotenv import load_dotenv
from telethon import events

import settings
from adapters.corpus_sources import build_corpus_source
from adapters.telegram_bot_notifier import TelegramBotNotifier
from adapters.telegram_mapper import build_context
from adapters.telegram_notifier import TelegramSavedMessagesNotifier
from core.engine import SecurityEngine
from core.models import FileDescriptor, Verdict
from core.processor import MessageProcessor
from get_session import authorize, build_client

NAME = "TRIPWIRE"
FONT = "tarty-1"


def _print_banner() -> None:
    tprint(NAME, FONT, space=1)


class _RedactingFormatter(logging.Formatter):
    def __init__(self, secrets: list[str], fmt: str, datefmt: Optional[str] = None) -> None:
        super().__init__(fmt=fmt, datefmt=datefmt)
        self._secrets = [secret for secret in secrets if secret]

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        for secret in self._secrets:
            message = message.replace(secret, "***")
        return message


def _collect_redaction_values(config: dict) -> list[str]:
    redact_cfg = config.get("redact", {}) if config else {}
    if not redact_cfg.get("enabled", False):
        return []
    values = []
    for name in redact_cfg.get("patterns", []):
        value = os.getenv(name)
        if value:
            values.append(value)
    return sorted(set(values), key=len, reverse=True)


def _configure_logging() -> None:
    config = settings.LOGGING or {}
    if not config.get("enabled", False):
        return

    load_dotenv()
    level_name = str(config.get("level", "INFO")).upper()
    level = getattr(logging, level_name, logging.INFO)

    fmt = "%(asctime)s %(levelname)s %(name)s: %(message)s"
    formatter = _RedactingFormatter(
        _collect_redaction_values(config), fmt=fmt, datefmt="%Y-%m-%d %H:%M:%S"
    )

    handlers: list[logging.Handler] = []

    if config.get("console", True):
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        handlers.append(console_handler)

    file_cfg = config.get("file", {})
    if file_cfg.get("enabled", False):
        path = file_cfg.get("path", "logs/tripwire.log")
        if not os.path.isabs(path):
            path = os.path.join(settings.PROJECT_ROOT, path)
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        file_handler = RotatingFileHandler(
            path,
            maxBytes=int(file_cfg.get("max_bytes", 5 * 1024 * 1024)),
            backupCount=int(file_cfg.get("backup_count", 5)),
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    if not handlers:
        return

    logging.basicConfig(level=level, handlers=handlers)


async def _load_engine() -> SecurityEngine:
    """Build the engine and run the one-time corpus load."""

    engine = SecurityEngine(keywords=settings.KEYWORDS)
    logger = logging.getLogger(__name__)
    logger.info("%s keyword rules are loaded", len(engine.keywords))

    source = build_corpus_source(settings.CORPUS, base_dir=settings.PROJECT_ROOT)
    if source is None:
        logger.warning("No corpus source configured; running keyword-only")
        return engine

    outcome = await engine.load_known_bad_corpus(source)
    if not outcome.ok:
        logger.warning("Continuing keyword-only: %s", outcome.error)
    return engine


def _build_notifier(client):
    # Select the notification adapter based on configuration to keep the core
    # processor independent from delivery details.
    if settings.NOTIFICATION_METHOD == "bot":
        bot_token = os.getenv("BOT_API")
        if not bot_token:
            raise RuntimeError("BOT_API is required when notification_method=bot")
        if not settings.BOT_CHAT_ID:
            raise RuntimeError("notifications.bot_chat_id is required for bot notifications")
        return TelegramBotNotifier(
            bot_token=bot_token,
            chat_id=str(settings.BOT_CHAT_ID),
            source_aliases=settings.SOURCE_ALIASES,
        )
    if settings.NOTIFICATION_METHOD == "saved_messages":
        return TelegramSavedMessagesNotifier(client, settings.SOURCE_ALIASES)
    raise RuntimeError("notification_method must be 'saved_messages' or 'bot'")


def _run() -> None:
    _print_banner()
    _configure_logging()
    logger = logging.getLogger(__name__)

    logger.info("Starting tripwire")

    client = build_client()
    # The corpus is loaded before wiring handlers so the first messages are
    # checked against the full known-bad list.
    engine = client.loop.run_until_complete(_load_engine())
    client.loop.run_until_complete(client.connect())
    client.loop.run_until_complete(authorize(client))

    notifier = _build_notifier(client)
    logger.info("Selected notification method - %s", settings.NOTIFICATION_METHOD)

    processor = MessageProcessor(
        engine=engine,
        notifier=notifier,
        allowed_sources=settings.SOURCES,
        notification_config=settings.NOTIFICATIONS,
    )

    @client.on(events.NewMessage(incoming=True))
    async def handler(event) -> None:
        try:
            # Bot alerts arrive as private bot messages; skip them to avoid loops.
            if settings.NOTIFICATION_METHOD == "bot":
                sender = await event.get_sender()
                if event.is_private and sender and getattr(sender, "bot", False):
                    return
            await processor.handle(build_context(event.message))
        except Exception:
            logger.exception("Error while processing message")

    client.start()
    logger.info("Client connected. Listening for incoming messages...")
    client.run_until_disconnected()


def check(kind: str, value: str, engine: SecurityEngine) -> Verdict:
    """Classify a single value from the command line."""

    if kind == "link":
        return engine.analyze_link(value)
    if kind == "file":
        return engine.analyze_file(FileDescriptor(name=value))
    if kind == "message":
        return engine.analyze_message(value)
    raise ValueError(f"Unsupported check kind: {kind}")


def _check(kind: str, value: str) -> None:
    _configure_logging()
    engine = asyncio.run(_load_engine())
    verdict = check(kind, value, engine)
    print(json.dumps(verdict.to_dict(), ensure_ascii=False))


def main(argv: Optional[list[str]] = None) -> None:
    parser = argparse.ArgumentParser(prog="tripwire")
    subparsers = parser.add_subparsers(dest="command")

    subparsers.add_parser("run", help="Watch incoming Telegram messages")
    check_parser = subparsers.add_parser("check", help="Classify a single link, file name, or message")
    check_parser.add_argument("kind", choices=["link", "file", "message"])
    check_parser.add_argument("value")

    args = parser.parse_args(argv)
    if args.command == "check":
        _check(args.kind, args.value)
        return
    _run()


if __name__ == "__main__":
    main()
