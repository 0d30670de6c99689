"""Base classes for element extractor plugins."""

from abc import ABC, abstractmethod
from typing import List

from ..models import CodeElement


class ElementExtractor(ABC):
    """Contract for extractors that recover documentable elements from source text."""

    languages: tuple[str, ...] = ()

    def supports(self, language: str) -> bool:
        """Return True when this extractor handles ``language``."""
        return language in self.languages

    @abstractmethod
    def extract(self, content: str) -> List[CodeElement]:
        """Return elements in pattern order with 1-based lines."""
