"""Exception hierarchy raised while building trigger request bodies."""

from __future__ import annotations

__all__ = [
    "EncodingError",
    "SerializationError",
    "PayloadTooLargeError",
    "EncryptionKeyError",
    "DecryptionError",
    "ValidationError",
]


class EncodingError(ValueError):
    """Base class for every failure surfaced by the encoder."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class SerializationError(EncodingError):
    """Raised when event data cannot be represented as JSON.

    The underlying encoder failure is always available as ``__cause__``.
    """


class PayloadTooLargeError(EncodingError):
    """Raised when an event payload exceeds the maximum allowed size.

    ``index`` is the 0-based position of the offending event for batch
    triggers and ``None`` for single triggers.
    """

    def __init__(self, message: str, *, size: int, limit: int, index: int | None = None) -> None:
        super().__init__(message)
        self.size = size
        self.limit = limit
        self.index = index


class EncryptionKeyError(EncodingError):
    """Raised when the encryption master key is missing or malformed."""


class DecryptionError(EncodingError):
    """Raised when an encrypted message cannot be opened."""


class ValidationError(EncodingError):
    """Raised when trigger arguments are rejected before encoding."""

    def __init__(self, message: str, *, index: int | None = None) -> None:
        super().__init__(message)
        self.index = index
