"""Request body encoders for the trigger and trigger-batch endpoints.

Both encoders are pure: they read their arguments, return the UTF-8 JSON
body and never keep state between calls. Any failure aborts the call
before a body is produced.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Sequence
from typing import Any

import msgspec

from .. import security
from ..const import MAX_EVENT_PAYLOAD_SIZE
from ..errors import PayloadTooLargeError, SerializationError
from .structures import BatchEvent, BatchPayload, Event, EventPayload

logger = logging.getLogger(__name__)

_BODY_ENCODER = msgspec.json.Encoder()


def encode_event_data(data: Any) -> bytes:
    """Normalize event data to the bytes published on the wire.

    Raw bytes pass through, text is taken verbatim as UTF-8 and every other
    value is serialised as compact JSON with mapping keys in sorted order.
    """
    if isinstance(data, bytes):
        return data
    if isinstance(data, (bytearray, memoryview)):
        return bytes(data)
    try:
        if isinstance(data, str):
            return data.encode("utf-8")
        _reject_non_finite(msgspec.to_builtins(data, order="deterministic"))
        return msgspec.json.encode(data, order="deterministic")
    except (TypeError, ValueError, OverflowError, RecursionError, msgspec.EncodeError) as exc:
        raise SerializationError(
            f"Event data of type {type(data).__name__} cannot be serialised: {exc}"
        ) from exc


def _reject_non_finite(value: Any, path: str = "$") -> None:
    """Raise ValueError for NaN or infinite floats, which JSON cannot carry."""
    if isinstance(value, float):
        if not math.isfinite(value):
            raise ValueError(f"non-finite float {value!r} at {path}")
    elif isinstance(value, dict):
        for key, item in value.items():
            _reject_non_finite(item, f"{path}.{key}")
    elif isinstance(value, (list, tuple)):
        for idx, item in enumerate(value):
            _reject_non_finite(item, f"{path}[{idx}]")


def _payload_text(channel: str, data: Any, encryption_key: bytes | None) -> tuple[str, int]:
    """Return the ``data`` field for ``channel`` and its size in bytes."""
    data_bytes = encode_event_data(data)
    if security.is_encrypted_channel(channel):
        text = security.encrypt(channel, data_bytes, encryption_key)
        return text, len(text.encode("utf-8"))
    return data_bytes.decode("utf-8", errors="replace"), len(data_bytes)


def encode_trigger_body(
    channels: Sequence[str],
    event: str,
    data: Any,
    socket_id: str | None = None,
    encryption_key: bytes | None = None,
    *,
    max_payload_size: int = MAX_EVENT_PAYLOAD_SIZE,
) -> bytes:
    """Build the body publishing one event to one or more channels.

    Encryption and the size check are decided by ``channels[0]`` alone; all
    channels share the same ``data`` field.

    Raises:
        SerializationError: ``data`` cannot be represented as JSON.
        PayloadTooLargeError: the payload exceeds ``max_payload_size``.
        EncryptionKeyError: the first channel is encrypted and the key is unusable.
        ValueError: ``channels`` is empty.
    """
    channel_list = [channels] if isinstance(channels, str) else list(channels)
    if not channel_list:
        raise ValueError("At least one channel is required")

    payload_data, size = _payload_text(channel_list[0], data, encryption_key)
    if size > max_payload_size:
        logger.debug(
            "Rejected trigger payload for %s: %d bytes over limit %d",
            event,
            size,
            max_payload_size,
            extra={
                "channel_count": len(channel_list),
                "payload_size": size,
                "payload_limit": max_payload_size,
            },
        )
        raise PayloadTooLargeError(
            f"Event payload exceeded maximum size ({size} bytes is too much)",
            size=size,
            limit=max_payload_size,
        )

    return _BODY_ENCODER.encode(
        EventPayload(
            name=event,
            channels=channel_list,
            data=payload_data,
            socket_id=socket_id,
        )
    )


def encode_trigger_batch_body(
    batch: Iterable[Event],
    encryption_key: bytes | None = None,
    *,
    max_payload_size: int = MAX_EVENT_PAYLOAD_SIZE,
) -> bytes:
    """Build the body publishing several events in one request.

    Entries keep the input order. Each event is encrypted and size-checked
    against its own channel; the first failing event aborts the whole batch.

    Raises:
        SerializationError: an event's data cannot be represented as JSON.
        PayloadTooLargeError: an event exceeds ``max_payload_size``; ``index``
            identifies it.
        EncryptionKeyError: an encrypted channel is present and the key is unusable.
    """
    entries: list[BatchEvent] = []
    for idx, event in enumerate(batch):
        payload_data, size = _payload_text(event.channel, event.data, encryption_key)
        if size > max_payload_size:
            logger.debug(
                "Rejected batch event #%d (%s): %d bytes over limit %d",
                idx,
                event.name,
                size,
                max_payload_size,
                extra={
                    "event_index": idx,
                    "payload_size": size,
                    "payload_limit": max_payload_size,
                },
            )
            raise PayloadTooLargeError(
                f"Data of the event #{idx} in batch, must be smaller than {max_payload_size} bytes",
                size=size,
                limit=max_payload_size,
                index=idx,
            )
        entries.append(
            BatchEvent(
                channel=event.channel,
                name=event.name,
                data=payload_data,
                socket_id=event.socket_id,
            )
        )
    return _BODY_ENCODER.encode(BatchPayload(batch=entries))


__all__ = [
    "encode_event_data",
    "encode_trigger_body",
    "encode_trigger_batch_body",
]
