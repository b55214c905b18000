"""
Comment handling repair step.

This module contains the step that strips JavaScript-style comments from the
text while leaving comment markers inside string literals alone.
"""

from ..utils.config import RecoveryOptions
from .base import RepairStepBase
from .string_utils import ANY_QUOTE, StringStateTracker


class CommentHandler(RepairStepBase):
    """Removes comments from JSON text."""

    name = "remove_comments"

    def process(self, text: str, options: RecoveryOptions) -> str:
        """Remove comments from JSON text."""
        return self.remove_comments(text)

    @staticmethod
    def remove_comments(text: str) -> str:
        """Remove single-line and multi-line comments from JSON."""
        result = []
        tracker = StringStateTracker(ANY_QUOTE)
        i = 0

        while i < len(text):
            char = text[i]
            next_char = text[i + 1] if i + 1 < len(text) else ""

            if tracker.in_string or char != "/" or next_char not in ("/", "*"):
                tracker.update_state(char)
                result.append(char)
                i += 1
                continue

            if next_char == "/":
                # Single-line comment - skip to end of line, keep the newline
                end = text.find("\n", i)
                i = len(text) if end == -1 else end
                continue

            end = text.find("*/", i + 2)
            if end == -1:
                # Unterminated block comment is kept verbatim
                result.append(char)
                i += 1
                continue
            i = end + 2

        return "".join(result)
