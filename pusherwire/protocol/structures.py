"""Trigger request body structures.

Field order of each struct is the order keys are emitted on the wire.
``omit_defaults`` drops ``socket_id`` entirely when it is ``None``.
"""

from __future__ import annotations

from typing import Any

import msgspec

__all__ = [
    "Event",
    "EventPayload",
    "BatchEvent",
    "BatchPayload",
    "EncryptedMessage",
]


class Event(msgspec.Struct, frozen=True):
    """One event to publish as part of a batch trigger."""

    channel: str
    name: str
    data: Any
    socket_id: str | None = None


class EventPayload(msgspec.Struct, frozen=True, omit_defaults=True):
    """Body of a single trigger to one or more channels."""

    name: str
    channels: list[str]
    data: str
    socket_id: str | None = None


class BatchEvent(msgspec.Struct, frozen=True, omit_defaults=True):
    """Entry of a batch trigger body."""

    channel: str
    name: str
    data: str
    socket_id: str | None = None


class BatchPayload(msgspec.Struct, frozen=True):
    """Body of a batch trigger."""

    batch: list[BatchEvent]


class EncryptedMessage(msgspec.Struct, frozen=True):
    """Textual ciphertext embedded as ``data`` for encrypted channels."""

    nonce: str
    ciphertext: str
