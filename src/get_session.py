"""Telegram client factory and interactive login for the watcher session."""

from __future__ import annotations

import logging
import os
from getpass import getpass

import qrcode
from dotenv import load_dotenv
from telethon import TelegramClient, errors

import settings

LOGIN_METHODS = {"qr", "phone"}


def session_path(session_name: str) -> str:
    """Resolve a session name to a .session location under the project root."""

    if os.path.isabs(session_name):
        return session_name
    return os.path.join(settings.PROJECT_ROOT, session_name)


def build_client() -> TelegramClient:
    """Create a Telethon client for the watcher.

    API_ID/API_HASH come from the environment via python-dotenv. The session
    name comes from SESSION_NAME, falling back to telegram.session_name in
    config.json, so the watcher and `tripwire check` share one project root.
    """

    load_dotenv()

    api_id = os.getenv("API_ID")
    api_hash = os.getenv("API_HASH")
    # Fail fast on missing credentials to avoid an ambiguous login prompt.
    if not api_id or not api_hash:
        raise RuntimeError("Missing API_ID or API_HASH in environment")

    session = session_path(os.getenv("SESSION_NAME") or settings.SESSION_NAME)
    logging.getLogger(__name__).info("Initializing Telegram client (session %s)", session)
    return TelegramClient(session, int(api_id), api_hash)


def _print_qr(url: str) -> None:
    qr = qrcode.QRCode(border=1)
    qr.add_data(url)
    qr.make(fit=True)
    qr.print_ascii(invert=True)


def _resolve_2fa_password() -> str:
    password = os.getenv("2FA")
    if password:
        return password
    return getpass("2FA password: ")


async def _authorize_with_qr(client: TelegramClient) -> None:
    qr = await client.qr_login()
    _print_qr(qr.url)
    await qr.wait(timeout=120)


async def _authorize_with_phone(client: TelegramClient) -> None:
    phone = os.getenv("PHONE") or input("Phone number (international format): ").strip()
    await client.send_code_request(phone)
    code = input("Login code: ").strip()
    await client.sign_in(phone=phone, code=code)


def _pick_login_method() -> str:
    method = (os.getenv("LOGIN_METHOD") or "").strip().lower()
    if method in LOGIN_METHODS:
        return method
    while True:
        print("")
        print("Login methods:")
        print("[1] QR code")
        print("[2] Phone code")
        print("[3] Exit")
        choice = input("tripwire > ").strip()
        if choice == "1":
            return "qr"
        if choice == "2":
            return "phone"
        if choice == "3":
            raise SystemExit(0)
        print("Invalid option. Please choose 1, 2, or 3.")


async def authorize(client: TelegramClient) -> None:
    """Log the client in unless the stored session is already authorized."""

    if await client.is_user_authorized():
        return

    load_dotenv()
    try:
        if _pick_login_method() == "phone":
            await _authorize_with_phone(client)
        else:
            await _authorize_with_qr(client)
    except errors.SessionPasswordNeededError:
        await client.sign_in(password=_resolve_2fa_password())
