"""
Structure and string repair steps.

This module contains repair steps that fix broken string values, unescaped
quotes and control characters inside strings, and unbalanced brackets.
"""

import json

from ..utils.config import RecoveryOptions
from .base import RepairStepBase
from .string_utils import StringStateTracker, is_quote_escaped, is_string_end_quote

CONTROL_CHAR_ESCAPES = {"\n": "\\n", "\r": "\\r", "\t": "\\t"}


def escape_unescaped_quotes(text: str) -> str:
    """Escape every double quote not already preceded by a backslash escape."""
    result = []
    for i, char in enumerate(text):
        if char == '"' and not is_quote_escaped(text, i):
            result.append('\\"')
        else:
            result.append(char)
    return "".join(result)


class BrokenValueRepairer(RepairStepBase):
    """Coerces the value of a one-line, one-key object into a single string."""

    name = "fix_broken_values"

    def process(self, text: str, options: RecoveryOptions) -> str:
        """Repair broken string values line by line."""
        return "\n".join(self.fix_line(line) for line in text.split("\n"))

    @staticmethod
    def fix_line(line: str) -> str:
        """
        Repair a line shaped like {key: value with "quotes"}.

        Only lines whose trimmed content is a single comma-free object are
        considered, and only when the value holds a double quote. Values that
        already parse, or that open a nested structure, are kept.
        """
        stripped = line.strip()
        if (
            len(stripped) < 2
            or not stripped.startswith("{")
            or not stripped.endswith("}")
            or "," in stripped
            or not BrokenValueRepairer._is_single_object(stripped)
        ):
            return line

        content = stripped[1:-1]
        colon = content.find(":")
        if colon == -1:
            return line

        key = content[:colon].strip()
        value = content[colon + 1 :].strip()
        if '"' not in value or value.startswith(("{", "[")):
            return line
        if BrokenValueRepairer._is_json_value(value):
            return line

        if not value.startswith('"'):
            value = '"' + value
        if not value.endswith('"'):
            value = value + '"'
        value = '"' + escape_unescaped_quotes(value[1:-1]) + '"'

        leading = line[: len(line) - len(line.lstrip())]
        trailing = line[len(line.rstrip()) :]
        return f"{leading}{{{key}: {value}}}{trailing}"

    @staticmethod
    def _is_single_object(stripped: str) -> bool:
        """Check that the opening brace is not closed before the last character."""
        depth = 0
        last = len(stripped) - 1
        tracker = StringStateTracker()

        for i, char in enumerate(stripped):
            if tracker.update_state(char):
                continue
            if char == "{":
                depth += 1
            elif char == "}":
                depth -= 1
                if depth == 0 and i != last:
                    return False
        return True

    @staticmethod
    def _is_json_value(value: str) -> bool:
        try:
            json.loads(value)
        except ValueError:
            return False
        return True


class InnerQuoteEscaper(RepairStepBase):
    """Escapes double quotes that sit inside a string instead of closing it."""

    name = "escape_inner_quotes"

    def process(self, text: str, options: RecoveryOptions) -> str:
        """Escape unprotected quotes in strings."""
        return self.escape_inner_quotes(text)

    @staticmethod
    def escape_inner_quotes(text: str) -> str:
        """
        Escape interior quotes of string literals.

        A quote inside a string closes it only when the next non-whitespace
        character is ':', ',', '}' or ']', or when the text ends. Any other
        unescaped quote is escaped.
        """
        result = []
        tracker = StringStateTracker()

        for i, char in enumerate(text):
            if (
                char == '"'
                and tracker.in_string
                and not tracker.escaped
                and not is_string_end_quote(text, i)
            ):
                result.append('\\"')
                continue

            tracker.update_state(char)
            result.append(char)

        return "".join(result)


class BracketBalancer(RepairStepBase):
    """Drops unmatched closers and appends missing ones."""

    name = "balance_brackets"

    def should_apply(self, options: RecoveryOptions) -> bool:
        """Skipped in safe mode."""
        return options.balance_brackets

    def process(self, text: str, options: RecoveryOptions) -> str:
        """Balance braces and brackets."""
        return self.balance(text)

    @staticmethod
    def balance(text: str) -> str:
        """
        Balance '{}' and '[]' independently, ignoring string contents.

        A closer with no open counterpart is removed. Missing '}' closers are
        appended first, then missing ']' closers.
        """
        curly_count = 0
        square_count = 0
        result = []
        tracker = StringStateTracker()

        for char in text:
            if tracker.update_state(char):
                result.append(char)
                continue

            if char == "{":
                curly_count += 1
            elif char == "[":
                square_count += 1
            elif char == "}":
                if curly_count == 0:
                    continue
                curly_count -= 1
            elif char == "]":
                if square_count == 0:
                    continue
                square_count -= 1
            result.append(char)

        return "".join(result) + "}" * curly_count + "]" * square_count


class ControlCharEscaper(RepairStepBase):
    """Escapes raw newlines, carriage returns and tabs inside strings."""

    name = "escape_control_chars"

    def process(self, text: str, options: RecoveryOptions) -> str:
        """Escape control characters inside strings."""
        return self.escape_control_chars(text)

    @staticmethod
    def escape_control_chars(text: str) -> str:
        """
        Replace literal newline, carriage return and tab inside strings.

        Existing two-character escapes such as \\n are left alone, but raw
        control characters are always rewritten, so the step is not
        idempotent on raw input.
        """
        result = []
        tracker = StringStateTracker()

        for char in text:
            inside = tracker.in_string
            tracker.update_state(char)
            if inside and char in CONTROL_CHAR_ESCAPES:
                result.append(CONTROL_CHAR_ESCAPES[char])
            else:
                result.append(char)

        return "".join(result)
