"""Domain error definitions."""

from __future__ import annotations


class MalformedInputError(ValueError):
    """Raised when a source export cannot be parsed into track records."""
