"""Application-level error types."""

from __future__ import annotations


class ConfigError(Exception):
    """Raised when a server config file fails parsing or validation."""
