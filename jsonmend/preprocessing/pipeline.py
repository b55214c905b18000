"""
Repair pipeline for composable JSON repair steps.

This module implements the pipeline pattern so the repair stages run in a
fixed order, each consuming the text produced by the previous one.
"""

import logging
from typing import Optional

from ..core.interfaces import RepairStep
from ..utils.config import RecoveryOptions, TraceSink
from .extractors import JsonBlockExtractor
from .handlers import CommentHandler
from .normalizers import (
    KeyQuoter,
    LiteralNormalizer,
    QuoteNormalizer,
    TrailingCommaRemover,
    ValueQuoter,
)
from .repairers import (
    BracketBalancer,
    BrokenValueRepairer,
    ControlCharEscaper,
    InnerQuoteEscaper,
)

logger = logging.getLogger(__name__)


def log_stage(stage: str, text: str) -> None:
    """Default trace sink: report a stage's output on the module logger."""
    logger.info("%s: %s", stage, text)


class RepairPipeline:
    """Manages a sequence of repair steps applied to JSON text."""

    def __init__(self, steps: Optional[list[RepairStep]] = None):
        self.steps = steps or []

    def add_step(self, step: RepairStep) -> None:
        """Add a repair step to the pipeline."""
        self.steps.append(step)

    @property
    def step_names(self) -> list[str]:
        return [step.name for step in self.steps]

    def process(
        self,
        text: str,
        options: Optional[RecoveryOptions] = None,
        sink: Optional[TraceSink] = None,
    ) -> str:
        """Apply all applicable repair steps to the text."""
        if options is None:
            options = RecoveryOptions()
        if sink is None and options.tracing:
            sink = options.trace_sink or log_stage

        result = text
        for step in self.steps:
            if step.should_apply(options):
                result = step.process(result, options)
                if sink is not None:
                    sink(step.name, result)
        return result

    @classmethod
    def create_default_pipeline(cls) -> "RepairPipeline":
        """Create the default repair pipeline with every stage in order."""
        pipeline = cls()

        # Content extraction
        pipeline.add_step(JsonBlockExtractor())

        # Cleanup and normalization
        pipeline.add_step(CommentHandler())
        pipeline.add_step(TrailingCommaRemover())
        pipeline.add_step(KeyQuoter())
        pipeline.add_step(QuoteNormalizer())
        pipeline.add_step(LiteralNormalizer())
        pipeline.add_step(ValueQuoter())

        # Structure and string repair
        pipeline.add_step(BrokenValueRepairer())
        pipeline.add_step(InnerQuoteEscaper())
        pipeline.add_step(BracketBalancer())
        pipeline.add_step(ControlCharEscaper())

        return pipeline

    @classmethod
    def create_safe_pipeline(cls) -> "RepairPipeline":
        """Create a pipeline without the bracket balancing stage."""
        pipeline = cls.create_default_pipeline()
        pipeline.steps = [
            step for step in pipeline.steps if not isinstance(step, BracketBalancer)
        ]
        return pipeline
