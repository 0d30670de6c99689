"""Tests for handoff.scoring."""

from __future__ import annotations

from handoff.scoring import DIRECT_MATCH, GENERIC_MATCH, PATTERN_MATCH, RelevanceScorer

KNOWLEDGE = """# Notes
line a
The createOrder endpoint stores a new order.
line b
line c
Email validation: use a regex pattern to check email format
line d
"""


def test_direct_match_uses_two_line_window() -> None:
    contexts = RelevanceScorer().score("createOrder", KNOWLEDGE)

    assert len(contexts) == 1
    context = contexts[0]
    assert context.source == DIRECT_MATCH
    assert context.score == 10
    assert context.text == "# Notes line a The createOrder endpoint stores a new order. line b line c"


def test_curated_keywords_score_pattern_matches() -> None:
    contexts = RelevanceScorer().score("validateEmail", KNOWLEDGE)

    # Both "email validation" and "email format" hit the same line.
    assert [context.source for context in contexts] == [PATTERN_MATCH, PATTERN_MATCH]
    assert [context.keyword for context in contexts] == ["email validation", "email format"]
    assert contexts[0].score == 8
    assert contexts[0].text == "line c Email validation: use a regex pattern to check email format line d"


def test_curated_lookup_accepts_snake_case() -> None:
    contexts = RelevanceScorer().score("validate_email", KNOWLEDGE)

    assert contexts and contexts[0].source == PATTERN_MATCH


def test_direct_hits_outrank_curated_hits() -> None:
    knowledge = "email validation is strict\nfiller\nfiller\nfiller\nvalidateEmail rejects blanks\n"

    contexts = RelevanceScorer().score("validateEmail", knowledge)

    assert [context.source for context in contexts] == [DIRECT_MATCH, PATTERN_MATCH]


def test_generic_keywords_only_when_nothing_else_matched() -> None:
    knowledge = "We retrieve records lazily\nand get them in batches\n"

    contexts = RelevanceScorer().score("getRecords", knowledge)

    assert [context.source for context in contexts] == [GENERIC_MATCH, GENERIC_MATCH]
    assert [context.score for context in contexts] == [5, 4]
    assert [context.keyword for context in contexts] == ["retrieve", "get"]


def test_generic_keywords_skipped_after_direct_hit() -> None:
    knowledge = "getRecords loads everything\nwe retrieve records lazily\n"

    contexts = RelevanceScorer().score("getRecords", knowledge)

    assert [context.source for context in contexts] == [DIRECT_MATCH]


def test_limit_and_stable_ordering() -> None:
    knowledge = "\n".join(f"loadData variant {index}" for index in range(5))

    contexts = RelevanceScorer(limit=3).score("loadData", knowledge)

    assert len(contexts) == 3
    assert contexts[0].text.startswith("loadData variant 0")
    assert contexts[1].text.startswith("loadData variant 0")
    assert "loadData variant 1" in contexts[1].text


def test_no_matches_returns_empty() -> None:
    assert RelevanceScorer().score("zzzUnknown", KNOWLEDGE) == []
