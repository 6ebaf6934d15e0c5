"""
Error taxonomy shared by the request pipeline.

Each class maps to one client-facing outcome in ``healthtrack.main``:
``Unauthenticated`` -> 401, ``ResourceUnavailable`` -> 503 (retryable),
``StorageError`` -> 500 with the cause logged but not echoed.
"""


class Unauthenticated(Exception):
    """The request carries no usable identity."""

    def __init__(self, reason: str, kind: str):
        super().__init__(reason)
        self.reason = reason
        self.kind = kind


class ResourceUnavailable(Exception):
    """No pooled connection became free within the configured wait."""


class StorageError(Exception):
    """A storage statement failed (constraint violation, lost connection...)."""
