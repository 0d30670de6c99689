"""Exceptions raised by the inject-docs pipeline."""

from __future__ import annotations

from typing import Iterable, List


class InjectDocsError(RuntimeError):
    """Base class for fatal inject-docs failures."""


class NoKnowledgeBaseError(InjectDocsError):
    """Raised when no knowledge document is present for the project."""

    def __init__(self, directory: str) -> None:
        super().__init__(
            f"No Handoff documentation found to inject (expected knowledge files under {directory}/)"
        )
        self.directory = directory


class NoSourceFilesError(InjectDocsError):
    """Raised when the file pattern resolves to no candidates."""

    def __init__(self, pattern: str | None = None) -> None:
        detail = f" matching {pattern!r}" if pattern else ""
        super().__init__(f"No source files found to process{detail}")
        self.pattern = pattern


class AllFilesUnprocessableError(InjectDocsError):
    """Raised when none of the candidate files produced documentable elements."""

    def __init__(self, unsaved_files: Iterable[str] = ()) -> None:
        super().__init__("No files could be processed. Please save your files and try again.")
        self.unsaved_files: List[str] = list(unsaved_files)


class ReadFailureError(InjectDocsError):
    """Raised when a candidate source file exists but cannot be read."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Failed to read {path}: {reason}")
        self.path = path
        self.reason = reason


class WriteFailureError(InjectDocsError):
    """Raised when a documented file cannot be written back to disk."""

    def __init__(self, path: str, reason: str, written: Iterable[str] = ()) -> None:
        super().__init__(f"Failed to write {path}: {reason}")
        self.path = path
        self.reason = reason
        self.written: List[str] = list(written)


__all__ = [
    "AllFilesUnprocessableError",
    "InjectDocsError",
    "NoKnowledgeBaseError",
    "NoSourceFilesError",
    "ReadFailureError",
    "WriteFailureError",
]
