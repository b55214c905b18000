"""
Utility functions for string-state tracking shared by the repair stages.

Every stage that must not touch the inside of string literals goes through
the tracker defined here, so quote and escape handling lives in one place.
"""

import re
from collections.abc import Callable, Generator
from dataclasses import dataclass
from re import Match, Pattern
from typing import Optional, Union

DOUBLE_QUOTE = '"'
ANY_QUOTE = "\"'"

# Type aliases for cleaner annotations
Replacement = Union[str, Callable[[Match[str]], str]]


@dataclass
class LexicalState:
    """Quote and escape state after consuming a character."""

    in_string: bool = False
    escaped: bool = False


class StringStateTracker:
    """Helper class to track string state one character at a time."""

    def __init__(self, quote_chars: str = DOUBLE_QUOTE) -> None:
        self.quote_chars = quote_chars
        self.state = LexicalState()
        self.string_char: Optional[str] = None

    @property
    def in_string(self) -> bool:
        return self.state.in_string

    @property
    def escaped(self) -> bool:
        return self.state.escaped

    def update_state(self, char: str) -> bool:
        """
        Advance the state past one character.

        Args:
            char: Current character

        Returns:
            True if the character belongs to a string span, delimiters included
        """
        state = self.state
        was_in_string = state.in_string

        if state.escaped:
            state.escaped = False
        elif state.in_string:
            if char == "\\":
                state.escaped = True
            elif char == self.string_char:
                state.in_string = False
                self.string_char = None
        elif char in self.quote_chars:
            state.in_string = True
            self.string_char = char

        return was_in_string or state.in_string

    def reset(self) -> None:
        """Reset string state tracking."""
        self.state = LexicalState()
        self.string_char = None


def iterate_with_string_tracking(
    text: str, quote_chars: str = DOUBLE_QUOTE
) -> Generator[tuple[int, str, bool], None, None]:
    """
    Iterate through text with string state tracking.

    Yields:
        Tuple of (index, character, in_string_state)
    """
    tracker = StringStateTracker(quote_chars)

    for i, char in enumerate(text):
        yield i, char, tracker.update_state(char)


def string_mask(text: str, quote_chars: str = DOUBLE_QUOTE) -> list[bool]:
    """Return, for each index of text, whether it lies inside a quoted string."""
    return [in_string for _, _, in_string in iterate_with_string_tracking(text, quote_chars)]


def sub_outside_strings(
    pattern: Union[str, Pattern[str]],
    repl: Replacement,
    text: str,
    quote_chars: str = DOUBLE_QUOTE,
) -> str:
    """
    Regex substitution that only rewrites matches starting outside strings.

    Matches that begin inside a string literal are left untouched. The mask
    is computed once on the input text, so replacements never shift it.
    """
    compiled = re.compile(pattern) if isinstance(pattern, str) else pattern
    mask = string_mask(text, quote_chars)

    def replace(match: Match[str]) -> str:
        if mask[match.start()]:
            return match.group(0)
        if callable(repl):
            return repl(match)
        return match.expand(repl)

    return compiled.sub(replace, text)


def is_quote_escaped(text: str, pos: int) -> bool:
    """Check if the quote at position is preceded by an odd run of backslashes."""
    backslash_count = 0
    j = pos - 1
    while j >= 0 and text[j] == "\\":
        backslash_count += 1
        j -= 1
    return backslash_count % 2 == 1


def is_string_end_quote(text: str, pos: int) -> bool:
    """Check if the quote at position closes a string rather than sitting inside it."""
    next_pos = pos + 1
    while next_pos < len(text) and text[next_pos] in " \t\n\r":
        next_pos += 1

    return next_pos >= len(text) or text[next_pos] in ":,}]"
