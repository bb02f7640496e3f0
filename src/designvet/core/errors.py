"""Engine error hierarchy."""

from __future__ import annotations


class VettingError(Exception):
    """Base class for errors raised by the vetting engine."""


class ValidationError(VettingError, ValueError):
    """Malformed or out-of-range input."""


class NotFoundError(VettingError, LookupError):
    """Operation targeted an unknown designer, assessment or submission."""

    def __init__(self, kind: str, key: str):
        super().__init__(f"Unknown {kind}: {key!r}")
        self.kind = kind
        self.key = key


class InvalidStateError(VettingError):
    """Operation is not allowed in the record's current state."""
