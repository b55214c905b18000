"""
Error message construction for failed repairs.

This module builds the input preview and the failure messages the engine
attaches to RecoveryExhausted.
"""

from dataclasses import dataclass
from typing import Optional

from .exceptions import RecoveryExhausted

ERROR_PREFIX = "[jsonmend]"
SAFE_FAILURE_MESSAGE = f"{ERROR_PREFIX} Unable to repair invalid JSON."
FAILURE_MESSAGE = f"{ERROR_PREFIX} Failed to parse repaired JSON."
PREVIEW_LENGTH = 100


@dataclass
class FailureContext:
    """Context information for a failed repair."""

    original_text: str
    parser_message: str
    preview_length: int = PREVIEW_LENGTH

    @property
    def preview(self) -> str:
        """Leading characters of the original input on a single line."""
        return build_preview(self.original_text, self.preview_length)


def build_preview(text: str, length: int = PREVIEW_LENGTH) -> str:
    """Truncate text, collapse newlines to spaces and trim it."""
    return text[:length].replace("\n", " ").strip()


def build_failure_message(context: FailureContext) -> str:
    """Build the detailed failure message."""
    return f'{FAILURE_MESSAGE} {context.parser_message} Input was: "{context.preview}..."'


def create_recovery_error(
    original_text: str, parser_message: Optional[str], safe_mode: bool
) -> RecoveryExhausted:
    """
    Create the error raised when recovery is exhausted.

    In safe mode the error carries the fixed generic message and nothing
    from the input. Otherwise it embeds the parser message and a preview of
    the original input.
    """
    if safe_mode:
        return RecoveryExhausted(SAFE_FAILURE_MESSAGE)

    context = FailureContext(
        original_text=original_text,
        parser_message=parser_message or "Unknown parsing error",
    )
    return RecoveryExhausted(
        build_failure_message(context),
        cause=context.parser_message,
        preview=context.preview,
    )
