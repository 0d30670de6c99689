"""Comment styles: one class per documentation syntax.

Each style owns both how a block is written and how an existing block is
recognised above an element, so adding a language means adding one style
and one entry in ``STYLE_BY_LANGUAGE``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Sequence

from ..heuristics import FLAVOR_JAVA, FLAVOR_JAVASCRIPT, FLAVOR_PYTHON
from ..models import CodeElement


class CommentStyle(ABC):
    """Formats and detects documentation comments for one syntax."""

    name: str = ""
    # Wording used for return descriptions; None means no return line.
    flavor: Optional[str] = None

    @abstractmethod
    def format(self, element: CodeElement, description: str, returns: Optional[str] = None) -> str:
        """Return the unindented comment block for ``element``."""

    @abstractmethod
    def has_existing_doc(self, lines: Sequence[str], index: int) -> bool:
        """Return True when the element at ``lines[index]`` is already documented."""

    def wants_returns(self, element: CodeElement) -> bool:
        return self.flavor is not None and element.is_callable

    def escape(self, text: str) -> str:
        """Neutralise sequences in ``text`` that would end the comment early."""
        return text.replace("*/", "*\\/")


class _StarBlockStyle(CommentStyle):
    """``/** ... */`` blocks with a tagged return line."""

    return_tag = "@returns"

    def format(self, element: CodeElement, description: str, returns: Optional[str] = None) -> str:
        lines = ["/**", f" * {self.escape(description)}"]
        if returns and self.wants_returns(element):
            lines.append(f" * {self.return_tag} {self.escape(returns)}")
        lines.append(" */")
        return "\n".join(lines)

    def has_existing_doc(self, lines: Sequence[str], index: int) -> bool:
        if index <= 0:
            return False
        previous = lines[index - 1].strip()
        if previous.startswith("/**"):
            return True
        if not previous.endswith("*/"):
            return False
        # Walk up through the comment body looking for its opener.
        for cursor in range(index - 2, -1, -1):
            line = lines[cursor].strip()
            if line.startswith("/**"):
                return True
            if line and not line.startswith("*"):
                return False
        return False


class JSDocStyle(_StarBlockStyle):
    name = "jsdoc"
    flavor = FLAVOR_JAVASCRIPT
    return_tag = "@returns"


class JavadocStyle(_StarBlockStyle):
    name = "javadoc"
    flavor = FLAVOR_JAVA
    return_tag = "@return"


class PythonDocstringStyle(CommentStyle):
    """Triple-quoted block with a Google-style ``Returns:`` section."""

    name = "docstring"
    flavor = FLAVOR_PYTHON
    quotes = '"""'

    def format(self, element: CodeElement, description: str, returns: Optional[str] = None) -> str:
        lines = [f"{self.quotes}{self.escape(description)}"]
        if returns and self.wants_returns(element):
            lines.extend(["", "    Returns:", f"        {self.escape(returns)}"])
        lines.append(f"    {self.quotes}")
        return "\n".join(lines)

    def escape(self, text: str) -> str:
        # Backslashes first so the escaped quotes are not doubled again.
        return text.replace("\\", "\\\\").replace(self.quotes, '\\"\\"\\"')

    def has_existing_doc(self, lines: Sequence[str], index: int) -> bool:
        if index > 0:
            previous = lines[index - 1].strip()
            if previous.startswith(self.quotes) or previous.endswith(self.quotes):
                return True
        # A regular docstring right below a one-line header also counts.
        if index + 1 < len(lines):
            following = lines[index + 1].strip()
            if following.startswith((self.quotes, "'''", 'r"""')):
                return True
        return False


class BlockCommentStyle(CommentStyle):
    """Single-line ``/* ... */`` fallback for languages without a doc syntax."""

    name = "block"
    flavor = None

    def format(self, element: CodeElement, description: str, returns: Optional[str] = None) -> str:
        return f"/* {self.escape(description)} */"

    def has_existing_doc(self, lines: Sequence[str], index: int) -> bool:
        if index <= 0:
            return False
        previous = lines[index - 1].strip()
        return previous.startswith("/*") and previous.endswith("*/")


JSDOC = JSDocStyle()
JAVADOC = JavadocStyle()
DOCSTRING = PythonDocstringStyle()
BLOCK = BlockCommentStyle()

STYLE_BY_LANGUAGE: Dict[str, CommentStyle] = {
    "javascript": JSDOC,
    "typescript": JSDOC,
    "python": DOCSTRING,
    "java": JAVADOC,
}


def style_for(language: str) -> CommentStyle:
    return STYLE_BY_LANGUAGE.get(language, BLOCK)


def documented_languages() -> List[str]:
    return sorted(STYLE_BY_LANGUAGE)


__all__ = [
    "BLOCK",
    "BlockCommentStyle",
    "CommentStyle",
    "DOCSTRING",
    "JAVADOC",
    "JSDOC",
    "JSDocStyle",
    "JavadocStyle",
    "PythonDocstringStyle",
    "STYLE_BY_LANGUAGE",
    "documented_languages",
    "style_for",
]
