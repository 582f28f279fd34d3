"""High-level encoder binding configuration to the trigger body encoders."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

import msgspec

from .config.model import EncoderConfig
from .errors import EncryptionKeyError, ValidationError
from .protocol.encoding import encode_trigger_batch_body, encode_trigger_body
from .protocol.structures import Event
from .security import is_encrypted_channel
from .validation import (
    validate_channel,
    validate_channels,
    validate_event_name,
    validate_socket_id,
)

logger = logging.getLogger(__name__)


class EventEncoder:
    """Validates trigger arguments and produces HTTP request bodies.

    Holds only immutable configuration, so one instance can be shared
    between threads.
    """

    def __init__(self, config: EncoderConfig | None = None) -> None:
        self.config = config if config is not None else EncoderConfig()

    def trigger(
        self,
        channels: str | Sequence[str],
        event: str,
        data: Any,
        socket_id: str | None = None,
    ) -> bytes:
        """Return the body for publishing ``event`` to ``channels``."""
        channel_list = validate_channels(
            channels,
            max_channels=self.config.max_channels_per_trigger,
        )
        validate_event_name(event)
        validate_socket_id(socket_id)
        self._require_key(channel_list[0])

        body = encode_trigger_body(
            channel_list,
            event,
            data,
            socket_id,
            self.config.encryption_master_key,
            max_payload_size=self.config.max_event_payload_size,
        )
        logger.debug(
            "Encoded trigger body for %d channel(s): %d bytes",
            len(channel_list),
            len(body),
            extra={"channel_count": len(channel_list), "body_size": len(body)},
        )
        return body

    def trigger_batch(self, events: Iterable[Event | Mapping[str, Any]]) -> bytes:
        """Return the body for publishing a batch of events in one request."""
        batch = [self._coerce_event(idx, item) for idx, item in enumerate(events)]
        body = encode_trigger_batch_body(
            batch,
            self.config.encryption_master_key,
            max_payload_size=self.config.max_event_payload_size,
        )
        logger.debug(
            "Encoded batch body with %d event(s): %d bytes",
            len(batch),
            len(body),
            extra={"event_count": len(batch), "body_size": len(body)},
        )
        return body

    def _coerce_event(self, idx: int, item: Event | Mapping[str, Any]) -> Event:
        if isinstance(item, Event):
            event = item
        else:
            try:
                event = msgspec.convert(item, Event)
            except msgspec.ValidationError as exc:
                raise ValidationError(f"Event #{idx} in batch is invalid: {exc}", index=idx) from exc

        validate_channel(event.channel, index=idx)
        validate_event_name(event.name, index=idx)
        validate_socket_id(event.socket_id, index=idx)
        self._require_key(event.channel, index=idx)
        return event

    def _require_key(self, channel: str, *, index: int | None = None) -> None:
        if is_encrypted_channel(channel) and not self.config.encryption_enabled:
            where = "" if index is None else f" (event #{index} in batch)"
            raise EncryptionKeyError(
                f"Cannot publish to encrypted channel {channel!r}{where} without an encryption master key"
            )


__all__ = ["EventEncoder"]
