"""Element extractor implementations and discovery utilities."""

from __future__ import annotations

from importlib import metadata
from typing import Callable, Dict, Iterable, List, Optional

from .base import ElementExtractor
from .patterns import JavaExtractor, JavaScriptExtractor, PatternExtractor, PythonExtractor
from ..models import CodeElement

_ENTRY_POINT_GROUP = "handoff.extractors"

_BUILTIN_FACTORIES: dict[str, Callable[[], ElementExtractor]] = {
    "javascript": JavaScriptExtractor,
    "python": PythonExtractor,
    "java": JavaExtractor,
}

_registry: Optional[Dict[str, ElementExtractor]] = None


def discover_extractors() -> Dict[str, ElementExtractor]:
    """Return a language -> extractor mapping; built-ins win over plugins."""
    by_language: Dict[str, ElementExtractor] = {}

    def _register(name: str, factory: Callable[[], object]) -> None:
        instance = factory()
        if not isinstance(instance, ElementExtractor):
            raise TypeError(f"Extractor factory for '{name}' did not return an ElementExtractor")
        for language in instance.languages:
            by_language.setdefault(language, instance)

    for name, factory in _BUILTIN_FACTORIES.items():
        _register(name, factory)

    for entry in _iter_entry_points():
        try:
            loaded = entry.load()
        except Exception as exc:  # pragma: no cover - plugin import failures
            raise RuntimeError(f"Failed to load extractor entry point '{entry.name}': {exc}") from exc
        _register(entry.name, _as_factory(loaded))

    return by_language


def extractor_for(language: str) -> Optional[ElementExtractor]:
    global _registry
    if _registry is None:
        _registry = discover_extractors()
    return _registry.get(language)


def extract_elements(content: str, language: str) -> List[CodeElement]:
    """Return elements for ``content``; unsupported languages yield nothing."""
    extractor = extractor_for(language)
    if extractor is None:
        return []
    return extractor.extract(content)


def _as_factory(obj: object) -> Callable[[], object]:
    if isinstance(obj, ElementExtractor):
        return lambda: obj
    if callable(obj):
        return obj  # type: ignore[return-value]
    raise TypeError("Extractor entry point must be an ElementExtractor subclass or factory")


def _iter_entry_points() -> Iterable[metadata.EntryPoint]:
    return metadata.entry_points().select(group=_ENTRY_POINT_GROUP)


__all__ = [
    "ElementExtractor",
    "PatternExtractor",
    "discover_extractors",
    "extract_elements",
    "extractor_for",
]
