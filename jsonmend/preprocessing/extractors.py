"""
Content extraction repair step.

This module contains the step that pulls the first JSON-like block out of
surrounding prose or a markdown code fence.
"""

import re

from ..utils.config import RecoveryOptions
from .base import RepairStepBase
from .string_utils import StringStateTracker

_LEADING_FENCE = re.compile(r"^```json\s*", re.IGNORECASE)
_TRAILING_FENCE = re.compile(r"```\Z")

_CLOSER_FOR = {"{": "}", "[": "]"}


def strip_code_fence(text: str) -> str:
    """Strip a leading ```json fence and a trailing ``` fence."""
    cleaned = _LEADING_FENCE.sub("", text.strip())
    return _TRAILING_FENCE.sub("", cleaned).strip()


def find_json_start(text: str) -> int:
    """Return the index of the first '{' or '[', or -1 if there is none."""
    first_brace = text.find("{")
    first_bracket = text.find("[")

    if first_brace >= 0 and (first_bracket == -1 or first_brace <= first_bracket):
        return first_brace
    return first_bracket


def extract_json_from_text(text: str) -> str:
    """
    Extract the first bracket-delimited JSON block from text.

    The scan stops where the bracket stack first empties. A closer that does
    not match the innermost opener stops the scan early and the text taken so
    far is returned. An unclosed block runs to the end of the text, rather
    than yielding an empty result, so bracket balancing can close it. When the
    text holds no '{' or '[', it is returned unchanged.
    """
    cleaned = strip_code_fence(text)

    start = find_json_start(cleaned)
    if start == -1:
        return text

    stack: list[str] = []
    tracker = StringStateTracker()

    for i in range(start, len(cleaned)):
        char = cleaned[i]
        if tracker.update_state(char):
            continue

        if char in "{[":
            stack.append(char)
        elif char in "}]":
            if not stack or _CLOSER_FOR[stack[-1]] != char:
                return cleaned[start:i]
            stack.pop()
            if not stack:
                return cleaned[start : i + 1]

    return cleaned[start:]


class JsonBlockExtractor(RepairStepBase):
    """Extracts the first JSON block from prose or markdown."""

    name = "extract_json"

    def should_apply(self, options: RecoveryOptions) -> bool:
        """Apply if extraction was requested."""
        return options.extract_json

    def process(self, text: str, options: RecoveryOptions) -> str:
        """Extract the first JSON block from the text."""
        return extract_json_from_text(text)
