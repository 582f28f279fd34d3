"""Argument checks applied before a trigger body is encoded."""

from __future__ import annotations

import re
from collections.abc import Sequence

from .const import (
    CHANNEL_NAME_PATTERN,
    MAX_CHANNEL_NAME_LENGTH,
    MAX_CHANNELS_PER_TRIGGER,
    MAX_EVENT_NAME_LENGTH,
    SOCKET_ID_PATTERN,
)
from .errors import ValidationError
from .security import is_encrypted_channel

_CHANNEL_NAME_RE = re.compile(CHANNEL_NAME_PATTERN)
_SOCKET_ID_RE = re.compile(SOCKET_ID_PATTERN)


def validate_channel(channel: str, *, index: int | None = None) -> str:
    if not isinstance(channel, str) or not channel:
        raise ValidationError("Channel name must be a non-empty string", index=index)
    if len(channel) > MAX_CHANNEL_NAME_LENGTH:
        raise ValidationError(
            f"Channel name {channel[:32]!r}... exceeds {MAX_CHANNEL_NAME_LENGTH} characters",
            index=index,
        )
    if _CHANNEL_NAME_RE.fullmatch(channel) is None:
        raise ValidationError(f"Invalid channel name: {channel!r}", index=index)
    return channel


def validate_channels(
    channels: str | Sequence[str],
    *,
    max_channels: int = MAX_CHANNELS_PER_TRIGGER,
) -> list[str]:
    """Return ``channels`` as a list after checking count and names.

    Publishing to an encrypted channel is only allowed on its own, since a
    single trigger carries one payload encrypted for one channel.
    """
    channel_list = [channels] if isinstance(channels, str) else list(channels)
    if not channel_list:
        raise ValidationError("At least one channel is required")
    if len(channel_list) > max_channels:
        raise ValidationError(f"You cannot trigger on more than {max_channels} channels at once")
    for channel in channel_list:
        validate_channel(channel)
    if len(channel_list) > 1 and any(is_encrypted_channel(c) for c in channel_list):
        raise ValidationError("You cannot trigger to multiple channels when using encrypted channels")
    return channel_list


def validate_event_name(name: str, *, index: int | None = None) -> str:
    if not isinstance(name, str) or not name:
        raise ValidationError("Event name must be a non-empty string", index=index)
    if len(name) > MAX_EVENT_NAME_LENGTH:
        raise ValidationError(
            f"Event name exceeds maximum length of {MAX_EVENT_NAME_LENGTH} characters",
            index=index,
        )
    return name


def validate_socket_id(socket_id: str | None, *, index: int | None = None) -> str | None:
    if socket_id is None:
        return None
    if not isinstance(socket_id, str) or _SOCKET_ID_RE.fullmatch(socket_id) is None:
        raise ValidationError(f"Invalid socket id: {socket_id!r}", index=index)
    return socket_id


__all__ = [
    "validate_channel",
    "validate_channels",
    "validate_event_name",
    "validate_socket_id",
]
