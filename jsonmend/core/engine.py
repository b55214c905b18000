"""
Recovery engine for jsonmend - turns malformed JSON-like text into strict JSON.
"""

import json
import logging
import math
import re
from re import Match
from typing import Any, Optional, TextIO, Union

from ..preprocessing.pipeline import RepairPipeline
from ..utils.config import RecoveryOptions
from .error_handling import create_recovery_error
from .exceptions import RecoveryExhausted, StrictParseError

logger = logging.getLogger(__name__)

NON_ASCII_PATTERN = re.compile(r"[^\x00-\x7f]")
CANONICAL_SEPARATORS = (",", ":")


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def strict_loads(text: str) -> Any:
    """
    Parse text as strict JSON.

    NaN, Infinity and -Infinity are rejected, as are documents nested too
    deeply for the parser.

    Raises:
        StrictParseError: If the text is not strict JSON
    """
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError as e:
        raise StrictParseError.from_decode_error(e) from e
    except ValueError as e:
        raise StrictParseError(str(e)) from e
    except RecursionError as e:
        raise StrictParseError("Maximum nesting depth exceeded") from e


def _escape_code_units(match: Match[str]) -> str:
    code = ord(match.group(0))
    if code > 0xFFFF:
        code -= 0x10000
        high = 0xD800 + (code >> 10)
        low = 0xDC00 + (code & 0x3FF)
        return f"\\u{high:04x}\\u{low:04x}"
    return f"\\u{code:04x}"


def encode_non_ascii(text: str) -> str:
    """Replace every non-ASCII character with lowercase \\uXXXX escapes.

    Characters outside the Basic Multilingual Plane become a surrogate pair,
    one escape per UTF-16 code unit.
    """
    return NON_ASCII_PATTERN.sub(_escape_code_units, text)


def _replace_non_finite(obj: Any) -> Any:
    """Replace NaN and infinities with None, recursively."""
    if isinstance(obj, float) and not math.isfinite(obj):
        return None
    if isinstance(obj, dict):
        return {k: _replace_non_finite(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_replace_non_finite(item) for item in obj]
    return obj


def _dumps(value: Any) -> str:
    return json.dumps(
        value, ensure_ascii=False, separators=CANONICAL_SEPARATORS, allow_nan=False
    )


def serialize(value: Any, encode_ascii: bool = False) -> str:
    """
    Serialize a parsed value to compact canonical JSON text.

    Non-finite floats, which only arise from overflowing number literals,
    are written as null. Numbers keep their parsed Python spelling, so 1.0
    stays 1.0 and 1e5 becomes 100000.0.
    """
    try:
        text = _dumps(value)
    except ValueError:
        text = _dumps(_replace_non_finite(value))

    if encode_ascii:
        text = encode_non_ascii(text)
    return text


def _emit(value: Any, options: RecoveryOptions) -> Any:
    if options.return_object:
        return value
    try:
        return serialize(value, options.encode_ascii)
    except RecursionError as e:
        raise RecoveryExhausted("[jsonmend] Repaired JSON is nested too deeply to serialize.") from e


def _resolve_options(
    options: Optional[RecoveryOptions], overrides: dict[str, Any]
) -> RecoveryOptions:
    if options is None:
        options = RecoveryOptions()
    return options.with_overrides(**overrides)


def repair(
    text: Union[str, bytes, bytearray],
    options: Optional[RecoveryOptions] = None,
    **overrides: Any,
) -> Any:
    """
    Repair JSON-like text and return strict JSON.

    The text is first parsed as is. Only when that fails are the repair
    stages run, followed by a second and final parse attempt.

    Args:
        text: The JSON-like text, possibly wrapped in prose or a code fence
        options: RecoveryOptions controlling the stages and the result shape
        **overrides: Keyword forms of RecoveryOptions fields, snake_case or
            camelCase, applied on top of options

    Returns:
        Compact JSON text, or the parsed value when return_object is set

    Raises:
        RecoveryExhausted: If the repaired text still does not parse
    """
    options = _resolve_options(options, overrides)

    if isinstance(text, (bytes, bytearray)):
        text = text.decode("utf-8")

    try:
        return _emit(strict_loads(text), options)
    except StrictParseError as e:
        if options.logging:
            logger.warning("Strict parse failed: %s", e.message)
            logger.warning("Trying to repair JSON...")

    pipeline = (
        RepairPipeline.create_safe_pipeline()
        if options.safe_mode
        else RepairPipeline.create_default_pipeline()
    )
    repaired = pipeline.process(text, options)

    try:
        value = strict_loads(repaired)
    except StrictParseError as e:
        if options.logging:
            logger.warning("Repair failed: %s", e.message)
        raise create_recovery_error(text, e.message, options.safe_mode) from e

    return _emit(value, options)


repair_json = repair


def loads(s: Union[str, bytes, bytearray], **overrides: Any) -> Any:
    """
    Repair JSON-like text and return the parsed value.

    Same as repair() with return_object set.
    """
    overrides["return_object"] = True
    return repair(s, **overrides)


def load(fp: TextIO, **overrides: Any) -> Any:
    """
    Repair JSON-like text read from a file-like object.

    Parameters:
        fp: File-like object containing the text
        (all other parameters same as loads())
    """
    return loads(fp.read(), **overrides)
