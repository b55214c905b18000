"""
JSON repair stages.

This module provides the repair pipeline for turning malformed JSON text into
strict JSON. Each stage is a focused, single-responsibility text transform;
the pipeline composes them in a fixed order.
"""

from .base import RepairStepBase
from .extractors import JsonBlockExtractor, extract_json_from_text
from .handlers import CommentHandler
from .normalizers import (
    KeyQuoter,
    LiteralNormalizer,
    QuoteNormalizer,
    TrailingCommaRemover,
    ValueQuoter,
)
from .pipeline import RepairPipeline
from .repairers import (
    BracketBalancer,
    BrokenValueRepairer,
    ControlCharEscaper,
    InnerQuoteEscaper,
)

__all__ = [
    "RepairPipeline",
    "RepairStepBase",
    "JsonBlockExtractor",
    "extract_json_from_text",
    "CommentHandler",
    "TrailingCommaRemover",
    "KeyQuoter",
    "QuoteNormalizer",
    "LiteralNormalizer",
    "ValueQuoter",
    "BrokenValueRepairer",
    "InnerQuoteEscaper",
    "BracketBalancer",
    "ControlCharEscaper",
]
