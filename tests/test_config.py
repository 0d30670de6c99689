"""Tests for handoff.config."""

from __future__ import annotations

from pathlib import Path

import pytest

from handoff.config import (
    DEFAULT_PATTERNS,
    ConfigError,
    HandoffConfig,
    InjectConfig,
    KnowledgeConfig,
    load_config,
)


def test_load_config_returns_defaults_when_missing(tmp_path: Path) -> None:
    config = load_config(tmp_path)

    assert isinstance(config, HandoffConfig)
    assert config.root == tmp_path.resolve()
    assert config.knowledge == KnowledgeConfig()
    assert config.inject == InjectConfig()
    assert config.inject.patterns == list(DEFAULT_PATTERNS)
    assert config.exclude_paths == []
    assert config.knowledge_dir == tmp_path.resolve() / ".project"


def test_load_config_parses_expected_fields(tmp_path: Path) -> None:
    config_file = tmp_path / ".handoff.yml"
    config_file.write_text(
        """
knowledge:
  directory: "docs/handoff/"
  documents: [assumptions.md, architecture.md]
  required: architecture.md
  min_meaningful_length: 10
inject:
  patterns:
    - "src/**/*.ts"
  exclude_dirs: [vendor]
  unsaved_threshold: "120"
  max_workers: 4
exclude_paths:
  - "generated/"
""",
        encoding="utf-8",
    )

    config = load_config(config_file)

    assert config.root == tmp_path.resolve()
    assert config.knowledge.directory == "docs/handoff"
    assert config.knowledge.documents == ["assumptions.md", "architecture.md"]
    assert config.knowledge.required == ["architecture.md"]
    assert config.knowledge.min_meaningful_length == 10
    assert config.inject.patterns == ["src/**/*.ts"]
    assert config.inject.exclude_dirs == ["vendor"]
    assert config.inject.unsaved_threshold == 120
    assert config.inject.max_workers == 4
    assert config.exclude_paths == ["generated/"]
    assert config.knowledge_dir == tmp_path.resolve() / "docs/handoff"


def test_load_config_ignores_invalid_values(tmp_path: Path) -> None:
    (tmp_path / ".handoff.yml").write_text(
        """
knowledge: "not a mapping"
inject:
  unsaved_threshold: -5
  max_workers: 0
""",
        encoding="utf-8",
    )

    config = load_config(tmp_path)

    assert config.knowledge == KnowledgeConfig()
    assert config.inject.unsaved_threshold == 50
    assert config.inject.max_workers == 1


def test_load_config_treats_empty_file_as_defaults(tmp_path: Path) -> None:
    (tmp_path / ".handoff.yml").write_text("\n", encoding="utf-8")

    config = load_config(tmp_path)

    assert config.inject == InjectConfig()


def test_load_config_rejects_non_mapping_root(tmp_path: Path) -> None:
    (tmp_path / ".handoff.yml").write_text("- just\n- a list\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_load_config_reports_yaml_errors(tmp_path: Path) -> None:
    (tmp_path / ".handoff.yml").write_text("inject: [unclosed\n", encoding="utf-8")

    with pytest.raises(ConfigError, match="Failed to parse"):
        load_config(tmp_path)
