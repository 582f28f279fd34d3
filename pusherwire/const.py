"""Shared constants for the pusherwire encoder."""
from __future__ import annotations

from typing import Final

# On dedicated clusters the service may allow twice the usual limit.
MAX_EVENT_PAYLOAD_SIZE: Final[int] = 20480
MAX_CHANNELS_PER_TRIGGER: Final[int] = 100
MAX_CHANNEL_NAME_LENGTH: Final[int] = 200
MAX_EVENT_NAME_LENGTH: Final[int] = 200

ENCRYPTED_CHANNEL_PREFIX: Final[str] = "private-encrypted-"
ENCRYPTION_MASTER_KEY_LENGTH: Final[int] = 32
SECRETBOX_NONCE_LENGTH: Final[int] = 24

CHANNEL_NAME_PATTERN: Final[str] = r"^[-a-zA-Z0-9_=@,.;]+$"
SOCKET_ID_PATTERN: Final[str] = r"^\d+\.\d+$"

DEFAULT_DEBUG_LOGGING: Final[bool] = False
ENV_PREFIX: Final[str] = "PUSHERWIRE_"

__all__ = [
    "MAX_EVENT_PAYLOAD_SIZE",
    "MAX_CHANNELS_PER_TRIGGER",
    "MAX_CHANNEL_NAME_LENGTH",
    "MAX_EVENT_NAME_LENGTH",
    "ENCRYPTED_CHANNEL_PREFIX",
    "ENCRYPTION_MASTER_KEY_LENGTH",
    "SECRETBOX_NONCE_LENGTH",
    "CHANNEL_NAME_PATTERN",
    "SOCKET_ID_PATTERN",
    "DEFAULT_DEBUG_LOGGING",
    "ENV_PREFIX",
]
