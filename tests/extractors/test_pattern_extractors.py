"""Tests for the regex element extractors and registry."""

from __future__ import annotations

import pytest

from handoff import extractors
from handoff.extractors import ElementExtractor, discover_extractors, extract_elements
from handoff.extractors.patterns import JavaExtractor, JavaScriptExtractor, PythonExtractor, line_number
from handoff.models import CodeElement


def test_javascript_extractor_finds_functions_classes_and_arrows() -> None:
    content = """const express = require('express');

export async function loadUsers(db) {
  return db.all();
}

class UserRepository {
  constructor(db) { this.db = db; }
}

export const formatPrice = (amount) => {
  return `$${amount}`;
};

const handler = async (req, res) => res.send('ok');
functionCall(1);
"""

    elements = JavaScriptExtractor().extract(content)

    assert elements == [
        CodeElement(type="function", name="loadUsers", line=3),
        CodeElement(type="class", name="UserRepository", line=7),
        CodeElement(type="function", name="formatPrice", line=11),
        CodeElement(type="function", name="handler", line=15),
    ]


def test_javascript_extractor_handles_typescript_annotations() -> None:
    content = "export const total: Total = (items: Item[]): number => items.length;\n"

    elements = JavaScriptExtractor().extract(content)

    assert elements == [CodeElement(type="function", name="total", line=1)]


def test_python_extractor_finds_defs_and_classes() -> None:
    content = """import os


class Settings(Base):
    def load(self):
        return os.environ

    async def refresh(self):
        pass


def main():
    pass
"""

    elements = PythonExtractor().extract(content)

    # Elements come back grouped by pattern, not sorted by line.
    assert elements == [
        CodeElement(type="function", name="load", line=5),
        CodeElement(type="function", name="refresh", line=8),
        CodeElement(type="function", name="main", line=12),
        CodeElement(type="class", name="Settings", line=4),
    ]


def test_java_extractor_finds_types_and_methods() -> None:
    content = """package app;

public class OrderService {
    private final Repo repo;

    public List<Order> findAll() {
        return repo.all();
    }

    protected static boolean isValid(Order order) {
        return order != null;
    }

    void packagePrivate() {}
}

interface Repo {}
"""

    elements = JavaExtractor().extract(content)

    assert elements == [
        CodeElement(type="class", name="OrderService", line=3),
        CodeElement(type="class", name="Repo", line=17),
        CodeElement(type="method", name="findAll", line=6),
        CodeElement(type="method", name="isValid", line=10),
    ]


def test_extractor_languages() -> None:
    assert JavaScriptExtractor().supports("typescript") is True
    assert PythonExtractor().supports("javascript") is False


def test_line_number_counts_newlines_before_offset() -> None:
    content = "a\nb\nc"
    assert line_number(content, 0) == 1
    assert line_number(content, content.index("c")) == 3


def test_extract_elements_unsupported_language_is_empty() -> None:
    assert extract_elements("fn main() {}\n", "rust") == []
    assert extract_elements("function a() {}\n", "unknown") == []


def test_extract_elements_uses_registry() -> None:
    elements = extract_elements("function run() {}\n", "typescript")
    assert elements == [CodeElement(type="function", name="run", line=1)]


def test_discover_extractors_includes_builtins() -> None:
    registry = discover_extractors()

    assert set(registry) >= {"javascript", "typescript", "python", "java"}
    assert all(isinstance(extractor, ElementExtractor) for extractor in registry.values())


class _RubyExtractor(ElementExtractor):
    languages = ("ruby", "python")

    def extract(self, content: str) -> list[CodeElement]:
        return [CodeElement(type="function", name="hello", line=1)]


class _FakeEntryPoint:
    def __init__(self, name: str, target: object) -> None:
        self.name = name
        self._target = target

    def load(self) -> object:
        return self._target


def test_discover_extractors_registers_entry_points(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        extractors,
        "_iter_entry_points",
        lambda: [_FakeEntryPoint("ruby", _RubyExtractor)],
    )

    registry = discover_extractors()

    assert isinstance(registry["ruby"], _RubyExtractor)
    assert isinstance(registry["python"], PythonExtractor)


def test_discover_extractors_rejects_bad_factories(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        extractors, "_iter_entry_points", lambda: [_FakeEntryPoint("bad", lambda: object())]
    )

    with pytest.raises(TypeError):
        discover_extractors()
