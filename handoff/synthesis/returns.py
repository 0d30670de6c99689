"""Return-value descriptions worded for each documentation flavor."""

from __future__ import annotations

from ..heuristics import DEFAULT_RETURNS, FLAVOR_JAVASCRIPT, RETURN_RULES, ReturnTexts, curated_entry


def _pick(texts: ReturnTexts, flavor: str) -> str:
    return texts.get(flavor) or texts[FLAVOR_JAVASCRIPT]


def describe_return(name: str, flavor: str = FLAVOR_JAVASCRIPT) -> str:
    """Describe what ``name`` returns: curated entry, name rule, then default."""
    entry = curated_entry(name)
    if entry is not None:
        return _pick(entry.returns, flavor)

    lower_name = name.lower()
    for rule in RETURN_RULES:
        if rule.applies(lower_name):
            return _pick(rule.describe(lower_name), flavor)

    return _pick(DEFAULT_RETURNS, flavor)


__all__ = ["describe_return"]
