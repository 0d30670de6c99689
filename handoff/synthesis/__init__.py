"""Description synthesis and comment formatting."""

from .describer import describe_from_context, describe_from_name, is_relevant
from .returns import describe_return
from .styles import CommentStyle, style_for
from .synthesizer import DocumentationSynthesizer

__all__ = [
    "CommentStyle",
    "DocumentationSynthesizer",
    "describe_from_context",
    "describe_from_name",
    "describe_return",
    "is_relevant",
    "style_for",
]
