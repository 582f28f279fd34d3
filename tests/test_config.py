"""Tests for EncoderConfig normalization and environment loading."""

from __future__ import annotations

import base64
import dataclasses
import logging

import pytest

from pusherwire.config import EncoderConfig, load_encoder_config
from pusherwire.config.schema import EncoderConfigSchema
from pusherwire.const import MAX_CHANNELS_PER_TRIGGER, MAX_EVENT_PAYLOAD_SIZE
from pusherwire.errors import EncryptionKeyError


def _b64(key: bytes) -> str:
    return base64.b64encode(key).decode("ascii")


def test_encoder_config_defaults() -> None:
    config = EncoderConfig()
    assert config.encryption_master_key is None
    assert config.encryption_enabled is False
    assert config.max_event_payload_size == MAX_EVENT_PAYLOAD_SIZE
    assert config.max_channels_per_trigger == MAX_CHANNELS_PER_TRIGGER
    assert config.debug_logging is False


def test_encoder_config_hides_key_in_repr(master_key: bytes) -> None:
    config = EncoderConfig(encryption_master_key=master_key)
    assert config.encryption_enabled is True
    assert "encryption_master_key" not in repr(config)


def test_encoder_config_is_immutable() -> None:
    config = EncoderConfig()
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.max_event_payload_size = 1  # type: ignore[misc]


def test_encoder_config_rejects_short_key() -> None:
    with pytest.raises(EncryptionKeyError):
        EncoderConfig(encryption_master_key=b"short")


@pytest.mark.parametrize(
    "overrides",
    [
        {"max_event_payload_size": 0},
        {"max_event_payload_size": -1},
        {"max_channels_per_trigger": 0},
    ],
)
def test_encoder_config_rejects_non_positive_limits(overrides: dict[str, int]) -> None:
    with pytest.raises(ValueError, match="positive integer"):
        EncoderConfig(**overrides)


@pytest.mark.parametrize("count", [101, 500])
def test_encoder_config_caps_channel_limit(count: int) -> None:
    with pytest.raises(ValueError, match="cannot exceed 100"):
        EncoderConfig(max_channels_per_trigger=count)


def test_encoder_config_accepts_channel_limit_cap() -> None:
    assert EncoderConfig(max_channels_per_trigger=100).max_channels_per_trigger == 100


def test_load_encoder_config_defaults(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.INFO, logger="pusherwire.config.settings"):
        config = load_encoder_config({})
    assert config == EncoderConfig()
    assert "encrypted channels are disabled" in caplog.text


def test_load_encoder_config_reads_prefixed_environment(master_key: bytes) -> None:
    environ = {
        "PUSHERWIRE_ENCRYPTION_MASTER_KEY_BASE64": _b64(master_key),
        "PUSHERWIRE_MAX_EVENT_PAYLOAD_SIZE": "40960",
        "PUSHERWIRE_MAX_CHANNELS_PER_TRIGGER": " 10 ",
        "PUSHERWIRE_DEBUG": "yes",
        "MAX_EVENT_PAYLOAD_SIZE": "1",
    }
    config = load_encoder_config(environ)
    assert config.encryption_master_key == master_key
    assert config.max_event_payload_size == 40960
    assert config.max_channels_per_trigger == 10
    assert config.debug_logging is True


def test_load_encoder_config_uses_os_environ(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PUSHERWIRE_MAX_EVENT_PAYLOAD_SIZE", "1234")
    assert load_encoder_config().max_event_payload_size == 1234


def test_load_encoder_config_raw_key() -> None:
    config = load_encoder_config({"PUSHERWIRE_ENCRYPTION_MASTER_KEY": "k" * 32})
    assert config.encryption_master_key == b"k" * 32


def test_load_encoder_config_blank_key_is_absent() -> None:
    config = load_encoder_config({"PUSHERWIRE_ENCRYPTION_MASTER_KEY_BASE64": "   "})
    assert config.encryption_master_key is None


def test_load_encoder_config_non_numeric_falls_back_to_default() -> None:
    config = load_encoder_config({"PUSHERWIRE_MAX_EVENT_PAYLOAD_SIZE": "lots"})
    assert config.max_event_payload_size == MAX_EVENT_PAYLOAD_SIZE


@pytest.mark.parametrize(
    "environ",
    [
        {"PUSHERWIRE_ENCRYPTION_MASTER_KEY_BASE64": _b64(bytes(16))},
        {"PUSHERWIRE_ENCRYPTION_MASTER_KEY_BASE64": "%%%"},
        {
            "PUSHERWIRE_ENCRYPTION_MASTER_KEY": "k" * 32,
            "PUSHERWIRE_ENCRYPTION_MASTER_KEY_BASE64": _b64(bytes(32)),
        },
        {"PUSHERWIRE_MAX_EVENT_PAYLOAD_SIZE": "0"},
        {"PUSHERWIRE_MAX_CHANNELS_PER_TRIGGER": "101"},
    ],
)
def test_load_encoder_config_rejects_invalid(environ: dict[str, str]) -> None:
    with pytest.raises(ValueError, match="Invalid encoder configuration"):
        load_encoder_config(environ)


def test_schema_builds_config(master_key: bytes) -> None:
    config = EncoderConfigSchema().load(
        {"encryption_master_key_base64": _b64(master_key), "debug_logging": True}
    )
    assert isinstance(config, EncoderConfig)
    assert config.encryption_master_key == master_key
    assert config.debug_logging is True
