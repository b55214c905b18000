"""
jsonmend Core Recovery Engine.

This module provides the repair entry points and the error taxonomy.
"""

from .engine import encode_non_ascii, load, loads, repair, repair_json, serialize, strict_loads
from .exceptions import RecoveryError, RecoveryExhausted, StrictParseError, jsonmendError

__all__ = [
    'repair', 'repair_json', 'loads', 'load',
    'strict_loads', 'serialize', 'encode_non_ascii',
    'jsonmendError', 'StrictParseError', 'RecoveryError', 'RecoveryExhausted',
]
