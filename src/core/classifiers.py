"""Link, file, and message classifiers (core domain).

Every classifier returns a fresh Verdict and never raises on bad input:
missing or malformed values resolve to a benign verdict with a reason.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any, List, Optional

from core.match_engine import MatchEngine
from core.models import CORPUS_SOURCE, KEYWORD_SOURCE, Verdict

URL_PATTERN = re.compile(r"https?://\S+", re.IGNORECASE)

BLOCKED_EXTENSION = ".exe"


def extract_urls(text: str) -> List[str]:
    """Return http(s) URLs in order of appearance."""

    return URL_PATTERN.findall(text)


def _file_name(file: Any) -> Optional[str]:
    if file is None:
        return None
    if isinstance(file, Mapping):
        name = file.get("name")
    else:
        name = getattr(file, "name", None)
    if not isinstance(name, str):
        return None
    return name


class LinkClassifier:
    """Classify a single URL."""

    def __init__(self, engine: MatchEngine) -> None:
        self._engine = engine

    def analyze(self, url: Optional[str]) -> Verdict:
        if not url or not isinstance(url, str):
            return Verdict(dangerous=False, reason="Empty URL")

        result = self._engine.matches(url.lower())
        if result.source == KEYWORD_SOURCE:
            return Verdict(dangerous=True, reason="Malicious keyword detected in URL")
        if result.source == CORPUS_SOURCE:
            return Verdict(dangerous=True, reason="URL found in malicious database")
        return Verdict(dangerous=False, reason="URL is safe")


class FileClassifier:
    """Classify a file by its name.

    Only the .exe extension is blocked outright and it is checked before any
    keyword or corpus lookup. Other executable-ish extensions are treated like
    any other name.
    """

    def __init__(self, engine: MatchEngine) -> None:
        self._engine = engine

    def analyze(self, file: Any) -> Verdict:
        name = _file_name(file)
        if not name:
            return Verdict(dangerous=False, reason="Invalid file")

        filename = name.lower()
        if filename.endswith(BLOCKED_EXTENSION):
            return Verdict(dangerous=True, reason="Executable (.exe) files are blocked")

        result = self._engine.matches(filename)
        if result.source == KEYWORD_SOURCE:
            return Verdict(dangerous=True, reason="Malicious keyword detected in filename")
        if result.source == CORPUS_SOURCE:
            return Verdict(dangerous=True, reason="Filename found in malicious database")
        return Verdict(dangerous=False, reason="File is safe")


class MessageClassifier:
    """Classify free text by the links it contains.

    Text outside of URLs is never matched, so a message without links is
    always safe. The first dangerous link wins and is returned as the
    verdict value.
    """

    def __init__(self, links: LinkClassifier) -> None:
        self._links = links

    def analyze(self, text: Optional[str]) -> Verdict:
        if not text or not isinstance(text, str):
            return Verdict(dangerous=False, reason="Empty message")

        urls = extract_urls(text)
        if not urls:
            return Verdict(dangerous=False, reason="No links found")

        for url in urls:
            verdict = self._links.analyze(url)
            if verdict.dangerous:
                return Verdict(dangerous=True, reason=verdict.reason, value=url)

        return Verdict(dangerous=False, reason="Message is safe")
