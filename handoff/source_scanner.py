"""Source discovery: resolve glob patterns into language-tagged candidates."""

from __future__ import annotations

import glob
from dataclasses import dataclass
from fnmatch import fnmatchcase
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from .config import DEFAULT_EXCLUDE_DIRS, DEFAULT_PATTERNS, HandoffConfig
from .logging import get_logger
from .models import UNKNOWN_LANGUAGE, FileDescriptor

# Always pruned, on top of the configurable build/VCS list.
_METADATA_DIRS = {
    ".hg",
    ".svn",
    ".venv",
    "venv",
    "__pycache__",
    ".pytest_cache",
    ".mypy_cache",
    ".idea",
    ".handoff",
}

_LANGUAGE_BY_SUFFIX = {
    ".js": "javascript",
    ".jsx": "javascript",
    ".ts": "typescript",
    ".tsx": "typescript",
    ".py": "python",
    ".java": "java",
    ".cs": "csharp",
    ".go": "go",
    ".rs": "rust",
    ".php": "php",
    ".rb": "ruby",
    ".cpp": "cpp",
    ".cc": "cpp",
    ".cxx": "cpp",
    ".hpp": "cpp",
    ".c": "c",
    ".h": "c",
}


@dataclass
class IgnoreRule:
    """Ignore rule parsed from .gitignore or the exclude_paths setting."""

    pattern: str
    directory_only: bool
    anchored: bool
    negate: bool

    def matches(self, rel_path: str) -> bool:
        parts = rel_path.split("/")
        if self.anchored or "/" in self.pattern:
            if self.directory_only:
                return rel_path.startswith(f"{self.pattern}/")
            return fnmatchcase(rel_path, self.pattern) or rel_path.startswith(f"{self.pattern}/")
        # Unanchored rules match any path segment; directory rules skip the file name.
        candidates = parts[:-1] if self.directory_only else parts
        return any(fnmatchcase(part, self.pattern) for part in candidates)


def build_ignore_rule(pattern: str, negate: bool = False) -> Optional[IgnoreRule]:
    pattern = pattern.strip()
    if not pattern:
        return None
    directory_only = pattern.endswith("/")
    if directory_only:
        pattern = pattern.rstrip("/")
    anchored = pattern.startswith("/")
    if anchored:
        pattern = pattern.lstrip("/")
    if not pattern:
        return None
    return IgnoreRule(
        pattern=pattern,
        directory_only=directory_only,
        anchored=anchored,
        negate=negate,
    )


def _parse_gitignore(path: Path) -> List[IgnoreRule]:
    if not path.is_file():
        return []
    rules: List[IgnoreRule] = []
    for raw_line in path.read_text(encoding="utf-8", errors="replace").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        negate = line.startswith("!")
        rule = build_ignore_rule(line[1:] if negate else line, negate=negate)
        if rule is not None:
            rules.append(rule)
    return rules


def _is_ignored(rel_path: str, rules: Sequence[IgnoreRule]) -> bool:
    ignored = False
    for rule in rules:
        if rule.matches(rel_path):
            ignored = not rule.negate
    return ignored


def detect_language(path: str | Path) -> str:
    """Map a file extension to a language key, ``"unknown"`` when unmapped."""
    return _LANGUAGE_BY_SUFFIX.get(Path(path).suffix.lower(), UNKNOWN_LANGUAGE)


class SourceScanner:
    """Resolves file patterns beneath a project root.

    Files are never opened here; languages come from extensions only.
    """

    def __init__(
        self,
        default_patterns: Sequence[str] = DEFAULT_PATTERNS,
        exclude_dirs: Iterable[str] = DEFAULT_EXCLUDE_DIRS,
        exclude_paths: Iterable[str] = (),
    ) -> None:
        self.default_patterns = list(default_patterns)
        self.exclude_dirs = set(exclude_dirs) | _METADATA_DIRS
        self.exclude_paths = list(exclude_paths)
        self.logger = get_logger("scanner")

    @classmethod
    def from_config(cls, config: HandoffConfig) -> "SourceScanner":
        exclude_paths = list(config.exclude_paths)
        exclude_paths.append(f"/{config.knowledge.directory.strip('/')}/")
        return cls(
            default_patterns=config.inject.patterns,
            exclude_dirs=config.inject.exclude_dirs,
            exclude_paths=exclude_paths,
        )

    def scan(self, root: str | Path, pattern: Optional[str] = None) -> List[FileDescriptor]:
        """Return deduplicated candidates in first-match order."""
        root_path = Path(root).expanduser().resolve()
        if not root_path.exists():
            raise FileNotFoundError(f"Project path not found: {root}")
        if not root_path.is_dir():
            raise NotADirectoryError(f"Project path is not a directory: {root}")

        rules = _parse_gitignore(root_path / ".gitignore")
        for exclude in self.exclude_paths:
            rule = build_ignore_rule(exclude)
            if rule is not None:
                rules.append(rule)

        patterns = [pattern] if pattern else self.default_patterns
        seen: set[str] = set()
        files: List[FileDescriptor] = []
        for current in patterns:
            matches = sorted(glob.glob(current, root_dir=root_path, recursive=True))
            self.logger.debug("Pattern %s matched %d paths", current, len(matches))
            for match in matches:
                rel_path = Path(match).as_posix()
                if rel_path in seen:
                    continue
                if not (root_path / rel_path).is_file():
                    continue
                if self._excluded(rel_path, rules):
                    continue
                seen.add(rel_path)
                files.append(FileDescriptor(path=rel_path, language=detect_language(rel_path)))
        return files

    def _excluded(self, rel_path: str, rules: Sequence[IgnoreRule]) -> bool:
        directories = rel_path.split("/")[:-1]
        if any(part in self.exclude_dirs for part in directories):
            return True
        return _is_ignored(rel_path, rules)


__all__ = ["IgnoreRule", "SourceScanner", "build_ignore_rule", "detect_language"]
