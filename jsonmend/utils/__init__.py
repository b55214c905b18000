"""Shared configuration for jsonmend."""

from .config import RecoveryOptions, TraceSink

__all__ = ["RecoveryOptions", "TraceSink"]
