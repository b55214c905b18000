"""
Base classes for repair steps.

This module contains the base class used by repair steps to ensure they can
be properly composed in a pipeline.
"""

from ..utils.config import RecoveryOptions


class RepairStepBase:
    """Base class for repair steps with common functionality."""

    name = "repair_step"

    def should_apply(self, _options: RecoveryOptions) -> bool:
        """Default implementation - always apply. Override in subclasses."""
        return True

    def process(self, text: str, _options: RecoveryOptions) -> str:
        """Process the text. Must be implemented by subclasses."""
        raise NotImplementedError("Subclasses must implement process()")
