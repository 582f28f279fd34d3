"""Data model for encoder configuration."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..const import (
    DEFAULT_DEBUG_LOGGING,
    MAX_CHANNELS_PER_TRIGGER,
    MAX_EVENT_PAYLOAD_SIZE,
)
from ..security import validate_encryption_key


@dataclass(slots=True, frozen=True)
class EncoderConfig:
    """Strongly typed, immutable configuration for :class:`EventEncoder`."""

    encryption_master_key: bytes | None = field(default=None, repr=False)
    max_event_payload_size: int = MAX_EVENT_PAYLOAD_SIZE
    max_channels_per_trigger: int = MAX_CHANNELS_PER_TRIGGER
    debug_logging: bool = DEFAULT_DEBUG_LOGGING

    def __post_init__(self) -> None:
        if self.encryption_master_key is not None:
            validate_encryption_key(self.encryption_master_key)
        self._require_positive("max_event_payload_size", self.max_event_payload_size)
        self._require_positive("max_channels_per_trigger", self.max_channels_per_trigger)
        if self.max_channels_per_trigger > MAX_CHANNELS_PER_TRIGGER:
            raise ValueError(
                f"max_channels_per_trigger cannot exceed {MAX_CHANNELS_PER_TRIGGER}"
            )

    @property
    def encryption_enabled(self) -> bool:
        return self.encryption_master_key is not None

    @staticmethod
    def _require_positive(name: str, value: int) -> int:
        if value <= 0:
            raise ValueError(f"{name} must be a positive integer")
        return value


__all__ = ["EncoderConfig"]
