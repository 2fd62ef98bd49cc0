"""Known-bad corpus storage and loading (core domain).

The corpus is empty until a load succeeds. A load replaces the whole entry
tuple in a single assignment, so concurrent readers observe either the old
set or the new set and never a partially loaded one.
"""

from __future__ import annotations

import logging
from typing import Iterable, Tuple

from core.keywords import normalize_indicators
from core.models import CORPUS_SOURCE, NO_MATCH, LoadOutcome, MatchResult
from core.ports import CorpusSource

LOGGER = logging.getLogger(__name__)

# Entries this short match a large share of ordinary URLs and filenames.
BROAD_ENTRY_LENGTH = 4


def parse_corpus_text(text: str) -> Tuple[str, ...]:
    """Split raw corpus text into normalized, non-empty indicators."""

    return normalize_indicators(text.split("\n"))


class KnownBadCorpus:
    """Read-mostly collection of known-bad indicators."""

    def __init__(self) -> None:
        self._entries: Tuple[str, ...] = ()
        self._loaded = False

    @property
    def entries(self) -> Tuple[str, ...]:
        return self._entries

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    def __len__(self) -> int:
        return len(self._entries)

    def replace(self, lines: Iterable[str]) -> int:
        """Replace the corpus wholesale with normalized lines."""

        entries = normalize_indicators(lines)
        broad = [entry for entry in entries if len(entry) < BROAD_ENTRY_LENGTH]
        if broad:
            LOGGER.warning(
                "Corpus contains %s very short entries that match broadly: %s",
                len(broad),
                ", ".join(broad[:10]),
            )
        self._entries = entries
        self._loaded = True
        return len(entries)

    async def load(self, source: CorpusSource) -> LoadOutcome:
        """Fetch the corpus from a source and swap it in.

        Failures never raise. The previous entries stay in place and the
        engine keeps running on keyword rules alone. Retrying is left to the
        caller.
        """

        try:
            text = await source.fetch_text()
            count = self.replace(parse_corpus_text(text))
        except Exception as exc:
            LOGGER.warning("Failed to load known-bad corpus: %s", exc)
            return LoadOutcome(ok=False, entries=len(self._entries), error=str(exc))

        LOGGER.info("Known-bad corpus loaded: %s entries", count)
        return LoadOutcome(ok=True, entries=count)

    def find(self, candidate: str) -> MatchResult:
        """Return the first corpus entry contained in the candidate."""

        for entry in self._entries:
            if entry in candidate:
                return MatchResult(matched=True, source=CORPUS_SOURCE, indicator=entry)
        return NO_MATCH
