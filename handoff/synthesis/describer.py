"""Natural-language descriptions for code elements."""

from __future__ import annotations

import re
from typing import Optional

from ..heuristics import (
    CODE_KEYWORD_HINTS,
    GENERIC_PHRASES,
    IRRELEVANT_PHRASES,
    KEYWORD_DESCRIPTIONS,
    NAME_KEYWORD_HINTS,
    NAME_RULES,
    RELEVANCE_RULES,
    collect_keywords,
    curated_entry,
    split_name,
)
from ..models import CodeElement

_MARKDOWN_CHARS = re.compile(r"[#*\-\[\]]")
_WHITESPACE = re.compile(r"\s+")
_NUMBERED_MARKER = re.compile(r"^\d+\.\s*")
_BULLET_MARKER = re.compile(r"^[•\-]\s*")
_FRAGMENT_SPLIT = re.compile(r"[.!?:]+")
_SENTENCE_SPLIT = re.compile(r"[.!?]+")

_MIN_FRAGMENT = 15
_MIN_DESCRIPTION = 10
_LONG_CONTEXT = 100
_SENTENCE_MIN = 20
_SENTENCE_MAX = 80

CODE_PREVIEW_LINES = 5


def clean_context(context: str) -> str:
    """Strip markdown punctuation, list markers and extra whitespace."""
    text = _MARKDOWN_CHARS.sub("", context)
    text = _WHITESPACE.sub(" ", text)
    text = _NUMBERED_MARKER.sub("", text)
    text = _BULLET_MARKER.sub("", text)
    return text.strip()


def is_relevant(name: str, sentence: str) -> bool:
    """Return True when ``sentence`` plausibly describes the element ``name``."""
    lower_name = name.lower()
    lower_sentence = sentence.lower()

    if any(phrase in lower_sentence for phrase in IRRELEVANT_PHRASES):
        return False

    for rule in RELEVANCE_RULES:
        if rule.applies(lower_name):
            return rule.accepts(lower_sentence)

    return lower_name in lower_sentence or split_name(name) in lower_sentence


def _sized(sentence: str) -> bool:
    return _SENTENCE_MIN < len(sentence) < _SENTENCE_MAX


def describe_from_context(element: CodeElement, context: str) -> Optional[str]:
    """Pull a description for ``element`` out of a knowledge snippet.

    Returns ``None`` when the snippet is too generic or unrelated, in which
    case the caller falls back to :func:`describe_from_name`.
    """
    description = clean_context(context)

    entry = curated_entry(element.name)
    if entry is not None and entry.extraction is not None:
        match = entry.extraction.search(description)
        if match:
            return match.group(0)

    for fragment in _FRAGMENT_SPLIT.split(description):
        trimmed = fragment.strip()
        if len(trimmed) > _MIN_FRAGMENT and is_relevant(element.name, trimmed):
            return trimmed

    lower_description = description.lower()
    if any(phrase in lower_description for phrase in GENERIC_PHRASES):
        return None

    if len(description) > _LONG_CONTEXT:
        sentences = [sentence.strip() for sentence in _SENTENCE_SPLIT.split(description)]
        lower_name = element.name.lower()
        for sentence in sentences:
            if lower_name in sentence.lower() and _sized(sentence):
                return sentence
        for sentence in sentences:
            if is_relevant(element.name, sentence) and _sized(sentence):
                return sentence
        return None

    if len(description) < _MIN_DESCRIPTION or not is_relevant(element.name, description):
        return None
    return description


def code_preview(element: CodeElement, content: str) -> str:
    """Return the declaration line and the few lines after it."""
    lines = content.split("\n")
    start = max(0, element.line - 1)
    return "\n".join(lines[start : start + CODE_PREVIEW_LINES])


def describe_from_name(element: CodeElement, content: str = "") -> str:
    """Structural description: curated table, name rules, keywords, catch-all."""
    entry = curated_entry(element.name)
    if entry is not None:
        return entry.description

    lower_name = element.name.lower()
    for rule in NAME_RULES:
        if rule.applies(lower_name):
            return rule.describe(lower_name)

    keywords = collect_keywords(NAME_KEYWORD_HINTS, lower_name)
    keywords.extend(collect_keywords(CODE_KEYWORD_HINTS, code_preview(element, content).lower()))
    if keywords:
        primary = keywords[0]
        return KEYWORD_DESCRIPTIONS.get(primary, f"Handles {primary} operations")

    return f"{element.name} - {element.type} implementation"


__all__ = [
    "clean_context",
    "code_preview",
    "describe_from_context",
    "describe_from_name",
    "is_relevant",
]
