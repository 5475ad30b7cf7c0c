from __future__ import annotations


class ConfigError(RuntimeError):
    """Raised when configuration is missing or invalid."""


class DecodeError(RuntimeError):
    """Raised when a payload is not text at all (malformed text never raises)."""


class InputError(RuntimeError):
    """Raised when a payload or batch input file cannot be read."""
