"""Core data models shared across handoff components."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

UNKNOWN_LANGUAGE = "unknown"

ELEMENT_FUNCTION = "function"
ELEMENT_CLASS = "class"
ELEMENT_METHOD = "method"

CALLABLE_TYPES = frozenset({ELEMENT_FUNCTION, ELEMENT_METHOD})

_DELIMITER_CHARS = "/*\"' \t"


@dataclass(frozen=True)
class FileDescriptor:
    """Candidate source file discovered by the scanner."""

    path: str
    language: str

    @property
    def supported(self) -> bool:
        return self.language != UNKNOWN_LANGUAGE


@dataclass(frozen=True)
class CodeElement:
    """Named declaration recovered from source text."""

    type: str
    name: str
    line: int

    @property
    def is_callable(self) -> bool:
        return self.type in CALLABLE_TYPES


@dataclass(frozen=True)
class ScoredContext:
    """Knowledge snippet ranked for a single element."""

    text: str
    score: int
    source: str
    keyword: Optional[str] = None


@dataclass
class KnowledgeBase:
    """Knowledge documents keyed by filename stem."""

    root: Path
    documents: Dict[str, str] = field(default_factory=dict)

    @property
    def text(self) -> str:
        return "\n".join(self.documents.values())

    def has_meaningful_content(self, min_length: int) -> bool:
        """Return True when any document holds more than ``min_length`` characters."""
        return any(doc and len(doc.strip()) > min_length for doc in self.documents.values())


@dataclass(frozen=True)
class DocumentationBlock:
    """Formatted comment destined for the line above ``element``."""

    element: CodeElement
    text: str

    @property
    def lines(self) -> List[str]:
        return self.text.split("\n")

    @property
    def headline(self) -> str:
        for line in self.lines:
            cleaned = line.strip().strip(_DELIMITER_CHARS).strip()
            if cleaned:
                return cleaned
        return ""


@dataclass
class FileResult:
    """Documentation proposed for one source file."""

    file: str
    language: str
    original_content: str
    documentation: List[DocumentationBlock] = field(default_factory=list)
    new_content: Optional[str] = None


@dataclass(frozen=True)
class InjectOptions:
    """Options supplied by the CLI or service layer."""

    files: Optional[str] = None
    language: Optional[str] = None
    dry_run: bool = False


@dataclass
class InjectOutcome:
    """Result of an inject-docs run."""

    status: str
    results: List[FileResult]
    unsaved_files: List[str] = field(default_factory=list)
    preview: Optional[str] = None
    written: List[str] = field(default_factory=list)

    @property
    def dry_run(self) -> bool:
        return self.status == "reported"


__all__ = [
    "CALLABLE_TYPES",
    "CodeElement",
    "DocumentationBlock",
    "ELEMENT_CLASS",
    "ELEMENT_FUNCTION",
    "ELEMENT_METHOD",
    "FileDescriptor",
    "FileResult",
    "InjectOptions",
    "InjectOutcome",
    "KnowledgeBase",
    "ScoredContext",
    "UNKNOWN_LANGUAGE",
]
