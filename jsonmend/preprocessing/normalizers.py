"""
Text normalization repair steps.

This module contains repair steps that normalize JSON text: trailing commas,
unquoted keys and values, single-quoted strings and non-standard literals.
Each substitution is applied only where it starts outside a string literal.
"""

import re
from re import Match

from ..utils.config import RecoveryOptions
from .base import RepairStepBase
from .string_utils import ANY_QUOTE, DOUBLE_QUOTE, StringStateTracker, sub_outside_strings

TRAILING_COMMA_PATTERN = re.compile(r",\s*([\]}])")
UNQUOTED_KEY_PATTERN = re.compile(r"([{,]\s*)([a-zA-Z_][a-zA-Z0-9_]*)(\s*:)")
INVALID_LITERAL_PATTERN = re.compile(r"-Infinity\b|\b(?:NaN|undefined|Infinity)\b")
CAPITALIZED_LITERAL_PATTERN = re.compile(r"\b(?:True|TRUE|False|FALSE|Null|NULL)\b")
UNQUOTED_VALUE_PATTERN = re.compile(
    r":\s*(?!(?:true|false|null)\b)([a-zA-Z_][a-zA-Z0-9_]*)(\s*[}\],])"
)
MISSING_OPEN_QUOTE_PATTERN = re.compile(r':\s*([a-zA-Z0-9_]+)"([}\],])')


class TrailingCommaRemover(RepairStepBase):
    """Removes commas that directly precede a closing brace or bracket."""

    name = "remove_trailing_commas"

    def process(self, text: str, options: RecoveryOptions) -> str:
        """Remove trailing commas."""
        return sub_outside_strings(TRAILING_COMMA_PATTERN, r"\1", text, ANY_QUOTE)


class KeyQuoter(RepairStepBase):
    """Wraps identifier-shaped object keys in double quotes."""

    name = "quote_keys"

    def process(self, text: str, options: RecoveryOptions) -> str:
        """Quote unquoted keys."""
        return sub_outside_strings(UNQUOTED_KEY_PATTERN, r'\1"\2"\3', text, ANY_QUOTE)


class QuoteNormalizer(RepairStepBase):
    """Converts single-quoted strings to double-quoted strings."""

    name = "normalize_quotes"

    def process(self, text: str, options: RecoveryOptions) -> str:
        """Normalize quotes in JSON text."""
        return self.convert_single_quotes(text)

    @staticmethod
    def convert_single_quotes(text: str) -> str:
        """
        Convert '...' spans outside double-quoted strings to "...".

        The span content is copied as is. An apostrophe without a partner is
        left alone.
        """
        result = []
        tracker = StringStateTracker(DOUBLE_QUOTE)
        i = 0

        while i < len(text):
            char = text[i]

            if char == "'" and not tracker.in_string:
                end = text.find("'", i + 1)
                if end != -1:
                    result.append(f'"{text[i + 1 : end]}"')
                    i = end + 1
                    continue

            tracker.update_state(char)
            result.append(char)
            i += 1

        return "".join(result)


class LiteralNormalizer(RepairStepBase):
    """Rewrites non-standard literals to their JSON equivalents."""

    name = "normalize_literals"

    def process(self, text: str, options: RecoveryOptions) -> str:
        """Replace invalid and capitalized literals."""
        result = self.replace_invalid_literals(text)
        return self.lowercase_literals(result)

    @staticmethod
    def replace_invalid_literals(text: str) -> str:
        """Replace NaN, undefined, Infinity and -Infinity with null."""
        return sub_outside_strings(INVALID_LITERAL_PATTERN, "null", text)

    @staticmethod
    def lowercase_literals(text: str) -> str:
        """Replace True/TRUE/False/FALSE/Null/NULL with their JSON spelling."""

        def lower(match: Match[str]) -> str:
            return match.group(0).lower()

        return sub_outside_strings(CAPITALIZED_LITERAL_PATTERN, lower, text)


class ValueQuoter(RepairStepBase):
    """Wraps bare identifier values in double quotes."""

    name = "quote_values"

    def process(self, text: str, options: RecoveryOptions) -> str:
        """Quote unquoted string values."""
        result = sub_outside_strings(UNQUOTED_VALUE_PATTERN, r': "\1"\2', text)
        # A word followed by a lone closing quote: `: John"}`
        return sub_outside_strings(MISSING_OPEN_QUOTE_PATTERN, r': "\1"\2', result)
