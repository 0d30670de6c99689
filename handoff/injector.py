"""Insertion of documentation blocks into source text."""

from __future__ import annotations

import re
from typing import List, Optional, Sequence, Tuple

from .logging import get_logger
from .models import DocumentationBlock
from .synthesis.styles import CommentStyle, style_for

_INDENT = re.compile(r"^[ \t]*")


def detect_newline(content: str) -> str:
    return "\r\n" if "\r\n" in content else "\n"


def indentation(line: str) -> str:
    match = _INDENT.match(line)
    return match.group(0) if match else ""


def indent_block(block: DocumentationBlock, indent: str) -> List[str]:
    """Prefix every non-empty block line with ``indent``."""
    return [f"{indent}{line}" if line else line for line in block.lines]


def anchor_index(lines: Sequence[str], index: int) -> int:
    """Return the first line of the decorators or annotations stacked on ``lines[index]``.

    A block for a decorated declaration must sit above the whole stack: a
    Python string between ``@decorator`` and ``def`` does not parse, and a
    Javadoc below ``@Override`` is not attached to the method.
    """
    while index > 0 and lines[index - 1].lstrip().startswith("@"):
        index -= 1
    return index


class DocumentationInjector:
    """Applies blocks bottom-up so pending line numbers stay valid."""

    def __init__(self) -> None:
        self.logger = get_logger("injector")

    def inject(
        self,
        content: str,
        blocks: Sequence[DocumentationBlock],
        language: str,
        style: CommentStyle | None = None,
    ) -> Tuple[str, List[DocumentationBlock]]:
        """Return the new content and the blocks that were actually inserted.

        Element lines refer to ``content`` as given. Blocks targeting a line
        that is out of range or already documented in ``content`` are skipped.
        """
        style = style or style_for(language)
        newline = detect_newline(content)
        lines = content.split(newline)

        placements: List[Tuple[int, DocumentationBlock]] = []
        for block in blocks:
            anchor = self._placement(block, lines, style)
            if anchor is not None:
                placements.append((anchor, block))

        for anchor, block in sorted(placements, key=lambda item: item[0], reverse=True):
            lines[anchor:anchor] = indent_block(block, indentation(lines[anchor]))
        return newline.join(lines), [block for _, block in placements]

    def _placement(
        self, block: DocumentationBlock, lines: Sequence[str], style: CommentStyle
    ) -> Optional[int]:
        """Return the insertion index for ``block`` or None when it is skipped."""
        index = block.element.line - 1
        if index < 0 or index >= len(lines):
            self.logger.debug(
                "Skipping %s: line %d outside content", block.element.name, block.element.line
            )
            return None
        anchor = anchor_index(lines, index)
        # A docstring below a decorated header is only visible from the header itself.
        if style.has_existing_doc(lines, anchor) or (
            anchor != index and style.has_existing_doc(lines, index)
        ):
            self.logger.debug("Skipping %s: already documented", block.element.name)
            return None
        return anchor


__all__ = [
    "DocumentationInjector",
    "anchor_index",
    "detect_newline",
    "indent_block",
    "indentation",
]
