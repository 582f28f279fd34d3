"""Settings loader for the pusherwire encoder.

Configuration is read from ``PUSHERWIRE_*`` environment variables (or any
mapping passed in) and validated by :class:`EncoderConfigSchema`:

``PUSHERWIRE_ENCRYPTION_MASTER_KEY_BASE64``
    Base64 form of the 32-byte master key for encrypted channels.
``PUSHERWIRE_ENCRYPTION_MASTER_KEY``
    Raw 32-character master key (prefer the base64 form).
``PUSHERWIRE_MAX_EVENT_PAYLOAD_SIZE``
    Per-event payload limit in bytes.
``PUSHERWIRE_MAX_CHANNELS_PER_TRIGGER``
    Channel fan-out limit for a single trigger.
``PUSHERWIRE_DEBUG``
    Enables debug logging.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from typing import Any

from marshmallow import ValidationError

from ..common import parse_bool, parse_int
from ..const import (
    DEFAULT_DEBUG_LOGGING,
    ENV_PREFIX,
    MAX_CHANNELS_PER_TRIGGER,
    MAX_EVENT_PAYLOAD_SIZE,
)
from .model import EncoderConfig
from .schema import EncoderConfigSchema

logger = logging.getLogger(__name__)


def _load_raw_config(environ: Mapping[str, str] | None = None) -> dict[str, str]:
    source = os.environ if environ is None else environ
    return {
        key[len(ENV_PREFIX) :].lower(): value
        for key, value in source.items()
        if key.startswith(ENV_PREFIX)
    }


def _optional(value: str | None) -> str | None:
    if value is None:
        return None
    stripped = value.strip()
    return stripped or None


def load_encoder_config(environ: Mapping[str, str] | None = None) -> EncoderConfig:
    """Build an :class:`EncoderConfig` from the environment."""
    raw = _load_raw_config(environ)

    prepared: dict[str, Any] = {
        "encryption_master_key": _optional(raw.get("encryption_master_key")),
        "encryption_master_key_base64": _optional(raw.get("encryption_master_key_base64")),
        "max_event_payload_size": parse_int(
            raw.get("max_event_payload_size"), MAX_EVENT_PAYLOAD_SIZE
        ),
        "max_channels_per_trigger": parse_int(
            raw.get("max_channels_per_trigger"), MAX_CHANNELS_PER_TRIGGER
        ),
        "debug_logging": parse_bool(raw.get("debug", DEFAULT_DEBUG_LOGGING)),
    }

    try:
        config: EncoderConfig = EncoderConfigSchema().load(prepared)
    except ValidationError as exc:
        raise ValueError(f"Invalid encoder configuration: {exc.messages}") from exc

    if not config.encryption_enabled:
        logger.info("No encryption master key configured; encrypted channels are disabled.")
    return config


__all__ = ["load_encoder_config"]
