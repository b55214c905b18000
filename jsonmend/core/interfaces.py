"""
Core interfaces and protocols for the recovery system.

This module defines the contracts that repair stages must
implement, so the pipeline can compose them without knowing their details.
"""

from typing import Any, Protocol


class RepairStep(Protocol):
    """Protocol for text repair steps in the repair pipeline."""

    name: str

    def process(self, text: str, options: Any) -> str:
        """Transform the input text according to this repair step."""
        ...

    def should_apply(self, options: Any) -> bool:
        """Determine if this step should be applied given the options."""
        ...
