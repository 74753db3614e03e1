"""Rule-based extraction of plan fields from freeform notes."""

from .base import BaseClassifier, Overrides, PassOutput
from .extract import extract_ideas
from .lines import LineClassifier
from .paragraphs import ParagraphClassifier

__all__ = [
    "BaseClassifier",
    "Overrides",
    "PassOutput",
    "extract_ideas",
    "LineClassifier",
    "ParagraphClassifier",
]
