"""Known-bad corpus source adapters.

Each adapter satisfies the core CorpusSource port and raises
CorpusSourceError on failure; the corpus turns that into a warning and keeps
running on keyword rules.
"""

from __future__ import annotations

import asyncio
import http.client
import logging
import os
import urllib.error
import urllib.request
from typing import Optional

from core.config import CorpusConfig
from core.ports import CorpusSource, CorpusSourceError

LOGGER = logging.getLogger(__name__)


class StaticCorpusSource:
    """Serve corpus text that is already in memory."""

    def __init__(self, text: str) -> None:
        self._text = text

    async def fetch_text(self) -> str:
        return self._text


class FileCorpusSource:
    """Read the corpus from a local text or CSV file."""

    def __init__(self, path: str) -> None:
        self._path = path

    def _read(self) -> str:
        try:
            with open(self._path, "r", encoding="utf-8") as handle:
                return handle.read()
        except (OSError, UnicodeDecodeError) as e:
            raise CorpusSourceError(f"Cannot read corpus file {self._path}: {e}") from e

    async def fetch_text(self) -> str:
        return await asyncio.to_thread(self._read)


class HttpCorpusSource:
    """Download the corpus over HTTP(S)."""

    def __init__(self, url: str, timeout: float = 10) -> None:
        self._url = url
        self._timeout = timeout

    def _download(self) -> str:
        # The blocking call runs in a worker thread so the event loop stays free.
        try:
            request = urllib.request.Request(self._url, method="GET")
            request.add_header("Accept", "text/plain, text/csv")
            with urllib.request.urlopen(request, timeout=self._timeout) as response:
                charset = response.headers.get_content_charset() or "utf-8"
                body = response.read()
        except urllib.error.HTTPError as e:
            raise CorpusSourceError(f"Corpus download failed with HTTP {e.code}") from e
        except (urllib.error.URLError, http.client.HTTPException, OSError, ValueError) as e:
            raise CorpusSourceError(f"Corpus download failed: {e}") from e

        try:
            return body.decode(charset)
        except (UnicodeDecodeError, LookupError) as e:
            raise CorpusSourceError("Corpus response is not text") from e

    async def fetch_text(self) -> str:
        LOGGER.info("Downloading known-bad corpus from %s", self._url)
        return await asyncio.to_thread(self._download)


def build_corpus_source(config: CorpusConfig, base_dir: Optional[str] = None) -> Optional[CorpusSource]:
    """Pick a corpus source from config, or None for keyword-only mode."""

    if config.url:
        return HttpCorpusSource(config.url, timeout=config.timeout_seconds)
    if config.path:
        path = config.path
        if base_dir and not os.path.isabs(path):
            path = os.path.join(base_dir, path)
        return FileCorpusSource(path)
    return None
