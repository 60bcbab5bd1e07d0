"""Engine error types."""

from __future__ import annotations


class InvalidParameterError(ValueError):
    """A generation parameter is outside its geometric domain."""
