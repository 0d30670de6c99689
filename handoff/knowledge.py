"""Knowledge base loading from the project knowledge directory."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Sequence

from .config import (
    DEFAULT_KNOWLEDGE_DIR,
    DEFAULT_KNOWLEDGE_DOCUMENTS,
    DEFAULT_REQUIRED_DOCUMENTS,
    HandoffConfig,
)
from .logging import get_logger
from .models import KnowledgeBase

ASSUMPTIONS_KEY = "assumptions"

SECTION_HEADERS: tuple[str, ...] = (
    "### Architecture Decisions",
    "### Design Principles",
    "### API Behaviors",
    "### Implementation Patterns",
    "### Current Assumptions",
)

TEMPLATE_MARKERS: tuple[str, ...] = (
    "How to Use This File",
    "Assumption Template",
    "Review Status",
    "*No assumptions recorded yet*",
)


def extract_meaningful_assumptions(content: str) -> str:
    """Keep only recorded assumptions, dropping the template and guide text.

    Content is collected after one of ``SECTION_HEADERS`` up to the next
    heading or code fence. Kept lines are trimmed.
    """
    kept: List[str] = []
    in_section = False
    for line in content.splitlines():
        if any(marker in line for marker in TEMPLATE_MARKERS):
            continue
        if any(header in line for header in SECTION_HEADERS):
            in_section = True
            continue
        stripped = line.strip()
        if stripped.startswith("#") or "```" in line:
            in_section = False
            continue
        if in_section and stripped:
            kept.append(stripped)
    return "\n".join(kept)


class KnowledgeLoader:
    """Reads the whitelisted knowledge documents for a project."""

    def __init__(
        self,
        directory: str = DEFAULT_KNOWLEDGE_DIR,
        documents: Sequence[str] = DEFAULT_KNOWLEDGE_DOCUMENTS,
        required: Sequence[str] = DEFAULT_REQUIRED_DOCUMENTS,
    ) -> None:
        self.directory = directory
        self.documents = list(documents)
        self.required = list(required)
        self.logger = get_logger("knowledge")

    @classmethod
    def from_config(cls, config: HandoffConfig) -> "KnowledgeLoader":
        return cls(
            directory=config.knowledge.directory,
            documents=config.knowledge.documents,
            required=config.knowledge.required,
        )

    def exists(self, root: str | Path) -> bool:
        """Return True when any presence-check document exists, even if empty."""
        base = Path(root) / self.directory
        return any((base / name).is_file() for name in self.required)

    def load(self, root: str | Path) -> KnowledgeBase:
        root_path = Path(root)
        knowledge = KnowledgeBase(root=root_path / self.directory)
        for name, path in self._iter_paths(knowledge.root):
            if not path.is_file():
                continue
            knowledge.documents[name] = path.read_text(encoding="utf-8", errors="replace")
            self.logger.debug("Loaded knowledge document %s", path)

        assumptions = knowledge.documents.get(ASSUMPTIONS_KEY)
        if assumptions is not None:
            knowledge.documents[ASSUMPTIONS_KEY] = extract_meaningful_assumptions(assumptions)
        return knowledge

    def _iter_paths(self, base: Path) -> Iterable[tuple[str, Path]]:
        for name in self.documents:
            path = base / name
            yield path.stem, path


__all__ = [
    "KnowledgeLoader",
    "SECTION_HEADERS",
    "TEMPLATE_MARKERS",
    "extract_meaningful_assumptions",
]
