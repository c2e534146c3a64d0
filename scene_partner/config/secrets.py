"""Secrets configuration (env names only; values are resolved at startup)."""

from __future__ import annotations

ENV_OPENAI_API_KEY = "OPENAI_API_KEY"
ENV_GOOGLE_TTS_API_KEY = "GOOGLE_TTS_API_KEY"

__all__ = ["ENV_GOOGLE_TTS_API_KEY", "ENV_OPENAI_API_KEY"]
