"""Domain-specific exceptions raised by mprobe runtime components."""

from __future__ import annotations


class MProbeError(Exception):
    """Base exception for mprobe-specific runtime failures."""


class ConfigurationError(MProbeError):
    """Raised when environment configuration cannot be parsed."""
