"""Core configuration dataclasses.

We keep config parsing outside the core, but these dataclasses define the
shape the core expects so adapters and app layers can build safely.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class CorpusConfig:
    """Where the known-bad corpus comes from. A URL wins over a path."""

    url: Optional[str]
    path: Optional[str]
    timeout_seconds: float


@dataclass(frozen=True)
class NotificationConfig:
    """Alerting settings consumed by the processor and notifier adapters."""

    alert_on_safe: bool
