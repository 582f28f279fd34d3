"""Configuration helpers for the pusherwire encoder."""

from .model import EncoderConfig
from .settings import load_encoder_config

__all__ = ["EncoderConfig", "load_encoder_config"]
