"""Keyword and corpus matching (core domain)."""

from __future__ import annotations

from typing import Iterable

from core.corpus import KnownBadCorpus
from core.models import KEYWORD_SOURCE, NO_MATCH, MatchResult


class MatchEngine:
    """Answer whether a normalized candidate hits a keyword or corpus entry.

    Matching logic:
    - Keyword rules are checked first. A keyword hit returns immediately and
      the corpus is not consulted, so the reported source is "keyword" even
      when a corpus entry would also match.
    - The corpus is checked only when no keyword matched.
    - Both checks are plain substring containment on the lower-cased
      candidate. There is no word-boundary or regex matching, so
      "myverifyaccount.com" hits the "verify" keyword.
    """

    def __init__(self, keywords: Iterable[str], corpus: KnownBadCorpus) -> None:
        self._keywords = tuple(keywords)
        self._corpus = corpus

    @property
    def keywords(self) -> tuple[str, ...]:
        return self._keywords

    @property
    def corpus(self) -> KnownBadCorpus:
        return self._corpus

    def match_keyword(self, candidate: str) -> MatchResult:
        for keyword in self._keywords:
            if keyword in candidate:
                return MatchResult(matched=True, source=KEYWORD_SOURCE, indicator=keyword)
        return NO_MATCH

    def matches(self, candidate: str) -> MatchResult:
        """Return the first match for an already normalized candidate."""

        keyword_hit = self.match_keyword(candidate)
        if keyword_hit.matched:
            return keyword_hit
        return self._corpus.find(candidate)
