"""Configuration loading for handoff (.handoff.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

CONFIG_FILENAME = ".handoff.yml"

DEFAULT_KNOWLEDGE_DIR = ".project"

DEFAULT_KNOWLEDGE_DOCUMENTS: tuple[str, ...] = (
    "assumptions.md",
    "architecture.md",
    "api-docs.md",
    "design-principles.md",
    "patterns.md",
    "business-logic.md",
    "constraints.md",
)

DEFAULT_REQUIRED_DOCUMENTS: tuple[str, ...] = ("assumptions.md",)

DEFAULT_PATTERNS: tuple[str, ...] = (
    "**/*.js",
    "**/*.ts",
    "**/*.jsx",
    "**/*.tsx",
    "**/*.py",
    "**/*.java",
    "**/*.cs",
    "**/*.go",
    "**/*.rs",
    "**/*.php",
    "**/*.rb",
    "**/*.cpp",
    "**/*.c",
    "**/*.h",
    "**/*.hpp",
)

DEFAULT_EXCLUDE_DIRS: tuple[str, ...] = ("node_modules", ".git", "dist", "build")

DEFAULT_MIN_MEANINGFUL_LENGTH = 50
DEFAULT_UNSAVED_THRESHOLD = 50


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class KnowledgeConfig:
    """Where the knowledge base lives and which documents count."""

    directory: str = DEFAULT_KNOWLEDGE_DIR
    documents: List[str] = field(default_factory=lambda: list(DEFAULT_KNOWLEDGE_DOCUMENTS))
    required: List[str] = field(default_factory=lambda: list(DEFAULT_REQUIRED_DOCUMENTS))
    min_meaningful_length: int = DEFAULT_MIN_MEANINGFUL_LENGTH


@dataclass
class InjectConfig:
    """Source discovery and processing settings."""

    patterns: List[str] = field(default_factory=lambda: list(DEFAULT_PATTERNS))
    exclude_dirs: List[str] = field(default_factory=lambda: list(DEFAULT_EXCLUDE_DIRS))
    unsaved_threshold: int = DEFAULT_UNSAVED_THRESHOLD
    max_workers: int = 1


@dataclass
class HandoffConfig:
    """Represents the settings defined in .handoff.yml."""

    root: Path
    knowledge: KnowledgeConfig = field(default_factory=KnowledgeConfig)
    inject: InjectConfig = field(default_factory=InjectConfig)
    exclude_paths: List[str] = field(default_factory=list)

    @property
    def knowledge_dir(self) -> Path:
        return self.root / self.knowledge.directory


def load_config(config_path: Path) -> HandoffConfig:
    """Load configuration from disk, falling back to defaults when absent."""
    config_file = _resolve_config_path(Path(config_path))
    root = config_file.parent.resolve()

    if not config_file.exists():
        return HandoffConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    knowledge = KnowledgeConfig()
    knowledge_data = _as_dict(data.get("knowledge"))
    if knowledge_data:
        directory = _as_str(knowledge_data.get("directory"))
        if directory:
            knowledge.directory = directory.rstrip("/")
        documents = _as_str_list(knowledge_data.get("documents"))
        if documents:
            knowledge.documents = documents
        required = _as_str_list(knowledge_data.get("required"))
        if required:
            knowledge.required = required
        knowledge.min_meaningful_length = _as_non_negative_int(
            knowledge_data.get("min_meaningful_length"),
            knowledge.min_meaningful_length,
        )

    inject = InjectConfig()
    inject_data = _as_dict(data.get("inject"))
    if inject_data:
        patterns = _as_str_list(inject_data.get("patterns"))
        if patterns:
            inject.patterns = patterns
        exclude_dirs = _as_str_list(inject_data.get("exclude_dirs"))
        if exclude_dirs:
            inject.exclude_dirs = exclude_dirs
        inject.unsaved_threshold = _as_non_negative_int(
            inject_data.get("unsaved_threshold"), inject.unsaved_threshold
        )
        inject.max_workers = max(1, _as_non_negative_int(inject_data.get("max_workers"), 1))

    return HandoffConfig(
        root=root,
        knowledge=knowledge,
        inject=inject,
        exclude_paths=_as_str_list(data.get("exclude_paths")),
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    if config_path.name != CONFIG_FILENAME:
        return (config_path.parent / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Any:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded if loaded is not None else {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_non_negative_int(value: Any, default: int) -> int:
    if isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value if value >= 0 else default
    if isinstance(value, str):
        try:
            parsed = int(value)
        except ValueError:
            return default
        return parsed if parsed >= 0 else default
    return default


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float))]
    return []


__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "DEFAULT_PATTERNS",
    "HandoffConfig",
    "InjectConfig",
    "KnowledgeConfig",
    "load_config",
]
