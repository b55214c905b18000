"""
jsonmend - Lenient JSON recovery engine.

jsonmend takes text that is supposed to be JSON but often is not quite - the
kind of output language models and hand-edited config files produce - and
applies a fixed sequence of best-effort repairs until it parses as strict JSON.

Handled defects:
- Unquoted keys and bare-word values
- Single-quoted strings
- Trailing commas and comments
- Markdown code fences and surrounding prose
- NaN, undefined, Infinity and capitalized true/false/null
- Unbalanced braces and brackets
- Raw newlines, tabs and unescaped quotes inside strings

Quick Start:
    import jsonmend
    jsonmend.repair('{name: "Seb", age: 42,}')  # '{"name":"Seb","age":42}'

    # Parsed value instead of text
    data = jsonmend.loads("{city: Paris}")

    # Model replies wrapped in prose or a code fence
    jsonmend.repair(reply, extract_json=True)

    # Terse errors, no bracket balancing
    from jsonmend import RecoveryOptions
    jsonmend.repair(text, RecoveryOptions.safe())
"""

from .core.engine import encode_non_ascii, load, loads, repair, repair_json
from .core.exceptions import RecoveryError, RecoveryExhausted, StrictParseError, jsonmendError
from .preprocessing.extractors import extract_json_from_text
from .preprocessing.pipeline import RepairPipeline
from .utils.config import RecoveryOptions

__version__ = "0.1.0"
__author__ = "jsonmend contributors"

__all__ = [
    # Repair entry points
    "repair", "repair_json", "loads", "load",
    # Helpers
    "extract_json_from_text", "encode_non_ascii", "RepairPipeline",
    # Configuration
    "RecoveryOptions",
    # Exception classes
    "jsonmendError", "StrictParseError", "RecoveryError", "RecoveryExhausted",
]
