"""Pytest configuration for pusherwire tests."""

from __future__ import annotations

import sys
from pathlib import Path

# Allow running the suite from a source checkout without installing.
_REPO_ROOT = str(Path(__file__).resolve().parent.parent)
if _REPO_ROOT not in sys.path:
    sys.path.insert(0, _REPO_ROOT)

import pytest

from pusherwire.config.model import EncoderConfig

ENCRYPTED_CHANNEL = "private-encrypted-orders"


@pytest.fixture
def master_key() -> bytes:
    return bytes(range(32))


@pytest.fixture
def encrypted_channel() -> str:
    return ENCRYPTED_CHANNEL


@pytest.fixture
def encoder_config(master_key: bytes) -> EncoderConfig:
    return EncoderConfig(encryption_master_key=master_key)


@pytest.fixture
def fixed_nonce(monkeypatch: pytest.MonkeyPatch) -> bytes:
    """Pin the secretbox nonce so encrypted output is reproducible."""
    from pusherwire import security

    nonce = bytes(range(100, 124))
    monkeypatch.setattr(security, "generate_nonce", lambda: nonce)
    return nonce
