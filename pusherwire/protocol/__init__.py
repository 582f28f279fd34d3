"""Wire structures and body encoders for the trigger endpoints."""

from .structures import BatchEvent, BatchPayload, EncryptedMessage, Event, EventPayload

__all__ = [
    "BatchEvent",
    "BatchPayload",
    "EncryptedMessage",
    "Event",
    "EventPayload",
]
