"""Configuration module exports (env names and defaults only)."""

from .secrets import ENV_OPENAI_API_KEY, ENV_GOOGLE_TTS_API_KEY
from .websocket import WS_ENDPOINT_PATH

__all__ = [
    "ENV_GOOGLE_TTS_API_KEY",
    "ENV_OPENAI_API_KEY",
    "WS_ENDPOINT_PATH",
]
