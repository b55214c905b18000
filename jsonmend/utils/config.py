"""
Configuration for jsonmend recovery.

This module defines the options record that selects which repair stages run
and what shape the result takes.
"""

from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from typing import Any, Callable, Optional

TraceSink = Callable[[str, str], None]


@dataclass
class RecoveryOptions:
    """Options controlling a single repair call."""

    safe_mode: bool = False
    extract_json: bool = False
    encode_ascii: bool = False
    return_object: bool = False
    logging: bool = False
    trace_sink: Optional[TraceSink] = None

    # camelCase aliases accepted alongside the field names
    _CAMEL_CASE_NAMES = {
        "safeMode": "safe_mode",
        "extractJson": "extract_json",
        "encodeAscii": "encode_ascii",
        "returnObject": "return_object",
        "traceSink": "trace_sink",
    }

    @property
    def balance_brackets(self) -> bool:
        """Whether the bracket balancing stage runs."""
        return not self.safe_mode

    @property
    def tracing(self) -> bool:
        """Whether intermediate text is reported after each stage."""
        return self.logging

    def with_overrides(self, **overrides: Any) -> "RecoveryOptions":
        """Return a copy with the given fields replaced."""
        if not overrides:
            return self
        return replace(self, **self._normalize_keys(overrides))

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "RecoveryOptions":
        """Create options from a mapping using snake_case or camelCase keys."""
        return cls(**cls._normalize_keys(mapping))

    @classmethod
    def _normalize_keys(cls, mapping: Mapping[str, Any]) -> dict[str, Any]:
        known = {f.name for f in fields(cls)}
        normalized = {}
        for key, value in mapping.items():
            name = cls._CAMEL_CASE_NAMES.get(key, key)
            if name not in known:
                raise ValueError(f"Unknown recovery option: {key!r}")
            normalized[name] = value
        return normalized

    @classmethod
    def safe(cls) -> "RecoveryOptions":
        """Create options that skip bracket balancing and hide failure details."""
        return cls(safe_mode=True)

    @classmethod
    def llm_output(cls) -> "RecoveryOptions":
        """Create options for model replies that wrap JSON in prose or fences."""
        return cls(extract_json=True)
