"""Pusher Channels payload encoder package initialisation."""

__version__ = "1.0.0"

import logging

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

from .encoder import EventEncoder  # noqa: E402
from .errors import (  # noqa: E402
    DecryptionError,
    EncodingError,
    EncryptionKeyError,
    PayloadTooLargeError,
    SerializationError,
    ValidationError,
)
from .protocol.encoding import (  # noqa: E402
    encode_event_data,
    encode_trigger_batch_body,
    encode_trigger_body,
)
from .protocol.structures import Event  # noqa: E402

__all__ = [
    "DecryptionError",
    "EncodingError",
    "EncryptionKeyError",
    "Event",
    "EventEncoder",
    "PayloadTooLargeError",
    "SerializationError",
    "ValidationError",
    "encode_event_data",
    "encode_trigger_batch_body",
    "encode_trigger_body",
]
