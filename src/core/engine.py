"""Public entry point for the classification engine.

Callers hold a SecurityEngine instance instead of reading shared globals.
The engine owns its keyword rules and its known-bad corpus; the corpus
source is injected at load time.
"""

from __future__ import annotations

from typing import Any, Iterable, Optional

from core.classifiers import FileClassifier, LinkClassifier, MessageClassifier
from core.corpus import KnownBadCorpus
from core.keywords import build_keyword_rules
from core.match_engine import MatchEngine
from core.models import (
    AnalysisTarget,
    FileTarget,
    LinkTarget,
    LoadOutcome,
    MessageTarget,
    Verdict,
)
from core.ports import CorpusSource


class SecurityEngine:
    """Facade exposing the corpus load and the three analyze operations."""

    def __init__(
        self,
        keywords: Optional[Iterable[str]] = None,
        corpus: Optional[KnownBadCorpus] = None,
    ) -> None:
        self._corpus = corpus if corpus is not None else KnownBadCorpus()
        self._matcher = MatchEngine(build_keyword_rules(keywords), self._corpus)
        self._links = LinkClassifier(self._matcher)
        self._files = FileClassifier(self._matcher)
        self._messages = MessageClassifier(self._links)

    @property
    def corpus(self) -> KnownBadCorpus:
        return self._corpus

    @property
    def keywords(self) -> tuple[str, ...]:
        return self._matcher.keywords

    async def load_known_bad_corpus(self, source: CorpusSource) -> LoadOutcome:
        """Load the corpus once at startup.

        The coroutine never raises, so it can be scheduled as a background
        task and left alone; classification runs keyword-only until it ends.
        """

        return await self._corpus.load(source)

    def analyze_link(self, url: Optional[str]) -> Verdict:
        return self._links.analyze(url)

    def analyze_file(self, file: Any) -> Verdict:
        return self._files.analyze(file)

    def analyze_message(self, text: Optional[str]) -> Verdict:
        return self._messages.analyze(text)

    def analyze(self, target: AnalysisTarget) -> Verdict:
        """Dispatch a target to the classifier for its variant."""

        if isinstance(target, LinkTarget):
            return self.analyze_link(target.url)
        if isinstance(target, FileTarget):
            return self.analyze_file(target.file)
        if isinstance(target, MessageTarget):
            return self.analyze_message(target.text)
        raise TypeError(f"Unsupported analysis target: {type(target).__name__}")
