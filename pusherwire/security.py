"""End-to-end encryption primitives for encrypted channels.

Payloads published to ``private-encrypted-`` channels are sealed with NaCl
secretbox (XSalsa20-Poly1305). The per-channel key is derived as::

    shared_secret = SHA256(channel_name || master_key)

and the wire representation is the JSON text ``{"nonce": ..., "ciphertext": ...}``
with both fields in standard base64.
"""

from __future__ import annotations

import base64
import binascii
import logging

import msgspec
import nacl.utils
from cryptography.hazmat.primitives import hashes
from nacl.exceptions import CryptoError
from nacl.secret import SecretBox

from .const import (
    ENCRYPTED_CHANNEL_PREFIX,
    ENCRYPTION_MASTER_KEY_LENGTH,
    SECRETBOX_NONCE_LENGTH,
)
from .errors import DecryptionError, EncryptionKeyError
from .protocol.structures import EncryptedMessage

logger = logging.getLogger(__name__)

_ENCRYPTED_MESSAGE_DECODER = msgspec.json.Decoder(EncryptedMessage)


def is_encrypted_channel(channel: str) -> bool:
    """Return True when payloads for ``channel`` must be encrypted."""
    return channel.startswith(ENCRYPTED_CHANNEL_PREFIX)


def validate_encryption_key(key: bytes | None) -> bytes:
    """Return ``key`` if it is a usable master key, otherwise raise."""
    if key is None:
        raise EncryptionKeyError(
            "An encryption master key is required to publish to encrypted channels"
        )
    if len(key) != ENCRYPTION_MASTER_KEY_LENGTH:
        raise EncryptionKeyError(
            f"Encryption master key must be {ENCRYPTION_MASTER_KEY_LENGTH} bytes, got {len(key)}"
        )
    return bytes(key)


def parse_encryption_master_key(
    raw: str | bytes | None = None,
    raw_base64: str | None = None,
) -> bytes | None:
    """Resolve the master key from its raw or base64 form.

    At most one of ``raw`` and ``raw_base64`` may be given. Returns ``None``
    when neither is set.
    """
    if raw and raw_base64:
        raise EncryptionKeyError(
            "Do not specify both encryption_master_key and encryption_master_key_base64"
        )
    if raw_base64:
        try:
            decoded = base64.b64decode(raw_base64, validate=True)
        except binascii.Error as exc:
            raise EncryptionKeyError("encryption_master_key_base64 must be valid base64") from exc
        return validate_encryption_key(decoded)
    if raw:
        key = raw.encode("utf-8") if isinstance(raw, str) else raw
        return validate_encryption_key(key)
    return None


def generate_shared_secret(channel: str, master_key: bytes) -> bytes:
    """Derive the 32-byte secretbox key for ``channel``."""
    digest = hashes.Hash(hashes.SHA256())
    digest.update(channel.encode("utf-8"))
    digest.update(master_key)
    return digest.finalize()


def generate_nonce() -> bytes:
    return nacl.utils.random(SECRETBOX_NONCE_LENGTH)


def encrypt(
    channel: str,
    plaintext: bytes,
    master_key: bytes | None,
    *,
    nonce: bytes | None = None,
) -> str:
    """Seal ``plaintext`` for ``channel`` and return the encrypted message text.

    Args:
        channel: Encrypted channel name the payload is published to.
        plaintext: Normalized event data.
        master_key: 32-byte encryption master key.
        nonce: Optional 24-byte nonce; a random one is drawn when omitted.
            Supplying a fixed nonce makes the output deterministic.

    Raises:
        EncryptionKeyError: If the master key is missing or not 32 bytes, or
            the nonce has the wrong length.
    """
    key = validate_encryption_key(master_key)
    if nonce is None:
        nonce = generate_nonce()
    elif len(nonce) != SECRETBOX_NONCE_LENGTH:
        raise EncryptionKeyError(f"Nonce must be {SECRETBOX_NONCE_LENGTH} bytes, got {len(nonce)}")

    box = SecretBox(generate_shared_secret(channel, key))
    sealed = box.encrypt(plaintext, nonce)
    message = EncryptedMessage(
        nonce=base64.b64encode(nonce).decode("ascii"),
        ciphertext=base64.b64encode(sealed.ciphertext).decode("ascii"),
    )
    return msgspec.json.encode(message).decode("utf-8")


def decrypt(channel: str, message: str | bytes, master_key: bytes | None) -> bytes:
    """Open an encrypted message produced by :func:`encrypt`."""
    key = validate_encryption_key(master_key)
    try:
        envelope = _ENCRYPTED_MESSAGE_DECODER.decode(message)
    except msgspec.DecodeError as exc:
        raise DecryptionError(f"Malformed encrypted message: {exc}") from exc

    try:
        nonce = base64.b64decode(envelope.nonce, validate=True)
        ciphertext = base64.b64decode(envelope.ciphertext, validate=True)
    except binascii.Error as exc:
        raise DecryptionError("Encrypted message fields must be valid base64") from exc

    if len(nonce) != SECRETBOX_NONCE_LENGTH:
        raise DecryptionError(f"Nonce must be {SECRETBOX_NONCE_LENGTH} bytes, got {len(nonce)}")

    box = SecretBox(generate_shared_secret(channel, key))
    try:
        return box.decrypt(ciphertext, nonce)
    except CryptoError as exc:
        logger.debug("Failed to open encrypted message for channel %s", channel)
        raise DecryptionError("Encrypted message could not be authenticated") from exc


__all__ = [
    "is_encrypted_channel",
    "validate_encryption_key",
    "parse_encryption_master_key",
    "generate_shared_secret",
    "generate_nonce",
    "encrypt",
    "decrypt",
]
