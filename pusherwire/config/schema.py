"""Marshmallow schema for EncoderConfig validation."""

from __future__ import annotations

from typing import Any, Dict

from marshmallow import EXCLUDE, Schema, ValidationError, fields, post_load, validate, validates_schema

from ..const import MAX_CHANNELS_PER_TRIGGER, MAX_EVENT_PAYLOAD_SIZE
from ..errors import EncryptionKeyError
from ..security import parse_encryption_master_key
from .model import EncoderConfig


class EncoderConfigSchema(Schema):
    """Declarative validation schema for encoder configuration."""

    class Meta:
        unknown = EXCLUDE

    # Encryption
    encryption_master_key = fields.Str(load_default=None, allow_none=True)
    encryption_master_key_base64 = fields.Str(load_default=None, allow_none=True)

    # Limits
    max_event_payload_size = fields.Int(
        load_default=MAX_EVENT_PAYLOAD_SIZE, validate=validate.Range(min=1)
    )
    max_channels_per_trigger = fields.Int(
        load_default=MAX_CHANNELS_PER_TRIGGER,
        validate=validate.Range(min=1, max=MAX_CHANNELS_PER_TRIGGER),
    )

    debug_logging = fields.Bool(load_default=False)

    @validates_schema
    def validate_master_key(self, data: Dict[str, Any], **kwargs: Any) -> None:
        try:
            parse_encryption_master_key(
                data.get("encryption_master_key"),
                data.get("encryption_master_key_base64"),
            )
        except EncryptionKeyError as exc:
            raise ValidationError(exc.message, field_name="encryption_master_key_base64") from exc

    @post_load
    def make_config(self, data: Dict[str, Any], **kwargs: Any) -> EncoderConfig:
        key = parse_encryption_master_key(
            data.pop("encryption_master_key", None),
            data.pop("encryption_master_key_base64", None),
        )
        return EncoderConfig(encryption_master_key=key, **data)


__all__ = ["EncoderConfigSchema"]
