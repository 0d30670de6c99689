"""Turns ranked knowledge context into formatted documentation blocks."""

from __future__ import annotations

from typing import Optional, Sequence

from ..logging import get_logger
from ..models import CodeElement, DocumentationBlock, ScoredContext
from ..scoring import RelevanceScorer
from .describer import describe_from_context, describe_from_name
from .returns import describe_return
from .styles import CommentStyle, style_for


class DocumentationSynthesizer:
    """Builds one :class:`DocumentationBlock` per element."""

    def __init__(self, scorer: RelevanceScorer | None = None) -> None:
        self.scorer = scorer or RelevanceScorer()
        self.logger = get_logger("synthesis")

    def synthesize(
        self,
        element: CodeElement,
        content: str,
        language: str,
        knowledge_text: Optional[str] = None,
    ) -> DocumentationBlock:
        """Document ``element``; ``knowledge_text`` is None when knowledge is unusable."""
        style = style_for(language)
        description = None
        if knowledge_text:
            contexts = self.scorer.score(element.name, knowledge_text)
            description = self.describe_with_knowledge(element, contexts)
        if description is None:
            description = describe_from_name(element, content)
            self.logger.debug("Using structural description for %s", element.name)
        return DocumentationBlock(element=element, text=self.format(element, description, style))

    @staticmethod
    def describe_with_knowledge(
        element: CodeElement, contexts: Sequence[ScoredContext]
    ) -> Optional[str]:
        for context in contexts:
            description = describe_from_context(element, context.text)
            if description:
                return description
        return None

    @staticmethod
    def format(element: CodeElement, description: str, style: CommentStyle) -> str:
        returns = None
        if style.wants_returns(element) and style.flavor is not None:
            returns = describe_return(element.name, style.flavor)
        return style.format(element, description, returns)


__all__ = ["DocumentationSynthesizer"]
