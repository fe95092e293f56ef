"""Exceptions raised by the overlay engine."""

from __future__ import annotations


class OverlayError(Exception):
    """Base class for errors reported by the overlay engine."""


class MalformedEntryError(OverlayError, ValueError):
    """Raised when translation output does not match the entry schema."""


class InvalidConfigurationError(OverlayError, ValueError):
    """Raised when a caller passes unusable settings or arguments."""


__all__ = ["OverlayError", "MalformedEntryError", "InvalidConfigurationError"]
