"""Regex-driven extractors for the supported languages.

These are token-pattern scanners, not parsers: nested braces, keywords inside
strings and multi-line signatures are only handled as far as each regex
happens to allow.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Sequence

from .base import ElementExtractor
from ..models import ELEMENT_CLASS, ELEMENT_FUNCTION, ELEMENT_METHOD, CodeElement


@dataclass(frozen=True)
class ElementPattern:
    """Declaration regex paired with the element type it yields."""

    kind: str
    regex: re.Pattern[str]


def _pattern(kind: str, expression: str) -> ElementPattern:
    return ElementPattern(kind=kind, regex=re.compile(expression, re.MULTILINE))


JAVASCRIPT_PATTERNS: tuple[ElementPattern, ...] = (
    _pattern(
        ELEMENT_FUNCTION,
        r"^[ \t]*(?:export\s+)?(?:default\s+)?(?:async\s+)?function\b\s*\*?\s*(\w+)\s*\([^)]*\)",
    ),
    _pattern(
        ELEMENT_CLASS,
        r"^[ \t]*(?:export\s+)?(?:default\s+)?(?:abstract\s+)?class\s+(\w+)",
    ),
    _pattern(
        ELEMENT_FUNCTION,
        r"^[ \t]*(?:export\s+)?const\s+(\w+)\s*(?::[^=\n]+)?=\s*(?:async\s*)?\([^)]*\)\s*(?::\s*[^=\n]+)?=>",
    ),
)

PYTHON_PATTERNS: tuple[ElementPattern, ...] = (
    _pattern(ELEMENT_FUNCTION, r"^[ \t]*(?:async[ \t]+)?def[ \t]+(\w+)[ \t]*\("),
    _pattern(ELEMENT_CLASS, r"^[ \t]*class[ \t]+(\w+)[ \t]*(?:\([^)]*\))?[ \t]*:"),
)

_JAVA_MODIFIERS = r"(?:(?:public|protected|private|abstract|final|static|sealed)\s+)*"

JAVA_PATTERNS: tuple[ElementPattern, ...] = (
    _pattern(
        ELEMENT_CLASS,
        rf"^[ \t]*{_JAVA_MODIFIERS}(?:class|interface|enum|record)\s+(\w+)",
    ),
    _pattern(
        ELEMENT_METHOD,
        r"^[ \t]*(?:public|protected|private)\s+"
        r"(?:(?:static|final|abstract|synchronized|native|default)\s+)*"
        r"(?:<[^>\n]+>\s+)?"
        r"(?!class\b|interface\b|enum\b|record\b)[\w.<>\[\]?, ]+?\s+(\w+)\s*\(",
    ),
)


def line_number(content: str, index: int) -> int:
    """Return the 1-based line containing character ``index``."""
    return content.count("\n", 0, index) + 1


class PatternExtractor(ElementExtractor):
    """Applies an ordered set of declaration patterns to source text."""

    def __init__(self, languages: Sequence[str], patterns: Sequence[ElementPattern]) -> None:
        self.languages = tuple(languages)
        self.patterns = tuple(patterns)

    def extract(self, content: str) -> List[CodeElement]:
        elements: List[CodeElement] = []
        for pattern in self.patterns:
            for match in pattern.regex.finditer(content):
                elements.append(
                    CodeElement(
                        type=pattern.kind,
                        name=match.group(1),
                        line=line_number(content, match.start()),
                    )
                )
        return elements


class JavaScriptExtractor(PatternExtractor):
    """Functions, classes and arrow functions in JavaScript and TypeScript."""

    def __init__(self) -> None:
        super().__init__(("javascript", "typescript"), JAVASCRIPT_PATTERNS)


class PythonExtractor(PatternExtractor):
    """``def`` and ``class`` declarations in Python."""

    def __init__(self) -> None:
        super().__init__(("python",), PYTHON_PATTERNS)


class JavaExtractor(PatternExtractor):
    """Type declarations and modifier-qualified methods in Java."""

    def __init__(self) -> None:
        super().__init__(("java",), JAVA_PATTERNS)


__all__ = [
    "ElementPattern",
    "JAVA_PATTERNS",
    "JAVASCRIPT_PATTERNS",
    "JavaExtractor",
    "JavaScriptExtractor",
    "PYTHON_PATTERNS",
    "PatternExtractor",
    "PythonExtractor",
    "line_number",
]
