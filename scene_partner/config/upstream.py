"""Upstream realtime speech service configuration."""

from __future__ import annotations

ENV_OPENAI_REALTIME_URL = "OPENAI_REALTIME_URL"
ENV_OPENAI_REALTIME_MODEL = "OPENAI_REALTIME_MODEL"
ENV_OPENAI_BETA_HEADER = "OPENAI_BETA_HEADER"
ENV_UPSTREAM_OPEN_TIMEOUT_S = "UPSTREAM_OPEN_TIMEOUT_S"
ENV_UPSTREAM_MAX_MESSAGE_BYTES = "UPSTREAM_MAX_MESSAGE_BYTES"

DEFAULT_OPENAI_REALTIME_URL = "wss://api.openai.com/v1/realtime"
DEFAULT_OPENAI_REALTIME_MODEL = "gpt-4o-realtime-preview-2024-12-17"
DEFAULT_OPENAI_BETA_HEADER = "realtime=v1"
DEFAULT_UPSTREAM_OPEN_TIMEOUT_S = 10.0
# Audio deltas can be large; the websockets default (1 MiB) is too tight.
DEFAULT_UPSTREAM_MAX_MESSAGE_BYTES = 16 * 1024 * 1024

# Upstream event that signals the session object exists and accepts session.update
UPSTREAM_SESSION_READY_EVENT = "session.created"

__all__ = [
    "ENV_OPENAI_REALTIME_URL",
    "ENV_OPENAI_REALTIME_MODEL",
    "ENV_OPENAI_BETA_HEADER",
    "ENV_UPSTREAM_OPEN_TIMEOUT_S",
    "ENV_UPSTREAM_MAX_MESSAGE_BYTES",
    "DEFAULT_OPENAI_REALTIME_URL",
    "DEFAULT_OPENAI_REALTIME_MODEL",
    "DEFAULT_OPENAI_BETA_HEADER",
    "DEFAULT_UPSTREAM_OPEN_TIMEOUT_S",
    "DEFAULT_UPSTREAM_MAX_MESSAGE_BYTES",
    "UPSTREAM_SESSION_READY_EVENT",
]
