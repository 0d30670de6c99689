"""Relevance scoring of knowledge snippets against element names."""

from __future__ import annotations

from typing import Iterable, List, Sequence

from .heuristics import curated_entry, generic_keywords
from .models import ScoredContext

DIRECT_MATCH = "direct-match"
PATTERN_MATCH = "pattern-match"
GENERIC_MATCH = "generic-match"

DIRECT_SCORE = 10
PATTERN_SCORE = 8

DIRECT_WINDOW = 2
KEYWORD_WINDOW = 1

DEFAULT_LIMIT = 2


def _window(lines: Sequence[str], index: int, radius: int) -> str:
    start = max(0, index - radius)
    end = min(len(lines), index + radius + 1)
    return " ".join(lines[start:end]).strip()


class RelevanceScorer:
    """Ranks knowledge snippets for an element.

    Direct name hits outrank curated keyword hits, which outrank generic
    prefix guesses. Generic guesses are only searched when the first two
    passes found nothing. The knowledge text is rescanned for every element.
    """

    def __init__(self, limit: int = DEFAULT_LIMIT) -> None:
        self.limit = limit

    def score(self, name: str, knowledge_text: str) -> List[ScoredContext]:
        lines = knowledge_text.split("\n")
        lowered = [line.lower() for line in lines]

        hits: List[ScoredContext] = list(self._direct_hits(name, lines, lowered))
        hits.extend(self._curated_hits(name, lines, lowered))
        if not hits:
            hits.extend(self._generic_hits(name, lines, lowered))

        # sorted() is stable, so equal scores keep scan order.
        ranked = sorted(hits, key=lambda hit: hit.score, reverse=True)
        return ranked[: self.limit]

    def _direct_hits(
        self, name: str, lines: Sequence[str], lowered: Sequence[str]
    ) -> Iterable[ScoredContext]:
        needle = name.lower()
        if not needle:
            return
        for index, line in enumerate(lowered):
            if needle in line:
                yield ScoredContext(
                    text=_window(lines, index, DIRECT_WINDOW),
                    score=DIRECT_SCORE,
                    source=DIRECT_MATCH,
                )

    def _curated_hits(
        self, name: str, lines: Sequence[str], lowered: Sequence[str]
    ) -> Iterable[ScoredContext]:
        entry = curated_entry(name)
        if entry is None:
            return
        for keyword in entry.keywords:
            yield from self._keyword_hits(keyword, PATTERN_SCORE, PATTERN_MATCH, lines, lowered)

    def _generic_hits(
        self, name: str, lines: Sequence[str], lowered: Sequence[str]
    ) -> Iterable[ScoredContext]:
        for keyword, score in generic_keywords(name):
            yield from self._keyword_hits(keyword, score, GENERIC_MATCH, lines, lowered)

    @staticmethod
    def _keyword_hits(
        keyword: str,
        score: int,
        source: str,
        lines: Sequence[str],
        lowered: Sequence[str],
    ) -> Iterable[ScoredContext]:
        for index, line in enumerate(lowered):
            if keyword in line:
                yield ScoredContext(
                    text=_window(lines, index, KEYWORD_WINDOW),
                    score=score,
                    source=source,
                    keyword=keyword,
                )


__all__ = [
    "DIRECT_MATCH",
    "GENERIC_MATCH",
    "PATTERN_MATCH",
    "RelevanceScorer",
]
