"""Shared alert formatting helpers.

Keeping formatting here prevents drift between adapters and keeps alerts
consistent regardless of delivery channel.
"""

from __future__ import annotations

import html

from core.models import MessageContext, Verdict

DIVIDER = "──────────────"


def format_source_label(context: MessageContext, source_aliases: dict[str, str]) -> str:
    """Return a human-friendly source label, using configured aliases."""

    alias = source_aliases.get(context.source_key)
    if not alias:
        return context.source_key
    return f"{alias} ({context.source_key})"


def _status(verdict: Verdict) -> str:
    return "DANGEROUS" if verdict.dangerous else "Safe"


def _format_markdown(
    verdict: Verdict,
    context: MessageContext,
    subject: str,
    source_aliases: dict[str, str],
) -> str:
    """Create the Markdown alert body used by Saved Messages."""

    def escape_md(value: str) -> str:
        for ch in r"*[`_":
            value = value.replace(ch, f"\\{ch}")
        return value

    timestamp = context.date.astimezone().strftime("%H:%M:%S %d-%m-%Y").strip()
    source = escape_md(format_source_label(context, source_aliases))

    lines = [
        f"[{timestamp}]",
        f"**Verdict:** {_status(verdict)}",
        f"**Source:**  {source}",
        DIVIDER,
        "",
        "**Why:**",
        escape_md(verdict.reason),
    ]
    if subject:
        lines.extend(["", "**Offending item:**", f"`{subject.replace('`', '')}`"])

    if context.permalink:
        lines.extend(["", "**Message:**", context.permalink])

    lines.append(DIVIDER)
    return "\n".join(lines)


def _format_html(
    verdict: Verdict,
    context: MessageContext,
    subject: str,
    source_aliases: dict[str, str],
) -> str:
    """Create the HTML alert body used by the Bot API adapter."""

    timestamp = html.escape(context.date.astimezone().strftime("%H:%M:%S %d-%m-%Y").strip())
    source = html.escape(format_source_label(context, source_aliases))

    parts = [
        f"[{timestamp}]",
        f"<b>Verdict:</b> {_status(verdict)}",
        f"<b>Source:</b> {source}",
        DIVIDER,
        "",
        "<b>Why:</b>",
        html.escape(verdict.reason),
    ]
    if subject:
        # Offending links are shown as code so they are never clickable.
        parts.extend(["", "<b>Offending item:</b>", f"<code>{html.escape(subject)}</code>"])

    if context.permalink:
        safe_link = html.escape(context.permalink)
        parts.extend(["", "<b>Message:</b>", f"<a href=\"{safe_link}\">{safe_link}</a>"])

    parts.append(DIVIDER)
    return "\n".join(parts)


def format_notification(
    verdict: Verdict,
    context: MessageContext,
    subject: str,
    source_aliases: dict[str, str],
    mode: str,
) -> str:
    """Return the alert formatted for the requested mode."""

    if mode == "markdown":
        return _format_markdown(verdict, context, subject, source_aliases)
    if mode == "html":
        return _format_html(verdict, context, subject, source_aliases)
    raise ValueError(f"Unsupported notification format: {mode}")
