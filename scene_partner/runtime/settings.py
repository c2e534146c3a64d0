"""Environment parsing for runtime settings.

Configuration names and defaults live in `scene_partner/config/*`; this module
resolves them once and exposes structured dataclasses to the rest of the server.
"""

from __future__ import annotations

import os

from scene_partner.config.secrets import ENV_OPENAI_API_KEY, ENV_GOOGLE_TTS_API_KEY
from scene_partner.config.tts import (
    ENV_GOOGLE_TTS_URL,
    DEFAULT_GOOGLE_TTS_URL,
    ENV_TTS_REQUEST_TIMEOUT_S,
    DEFAULT_TTS_REQUEST_TIMEOUT_S,
)
from scene_partner.state.settings import (
    AppSettings,
    TtsSettings,
    AuthSettings,
    SessionSettings,
    UpstreamSettings,
)
from scene_partner.config.upstream import (
    ENV_OPENAI_BETA_HEADER,
    ENV_OPENAI_REALTIME_URL,
    ENV_OPENAI_REALTIME_MODEL,
    DEFAULT_OPENAI_BETA_HEADER,
    DEFAULT_OPENAI_REALTIME_URL,
    ENV_UPSTREAM_OPEN_TIMEOUT_S,
    DEFAULT_OPENAI_REALTIME_MODEL,
    ENV_UPSTREAM_MAX_MESSAGE_BYTES,
    DEFAULT_UPSTREAM_OPEN_TIMEOUT_S,
    DEFAULT_UPSTREAM_MAX_MESSAGE_BYTES,
)
from scene_partner.config.session import (
    ENV_SCENE_PARTNER_VOICE,
    DEFAULT_SCENE_PARTNER_VOICE,
    ENV_SCENE_PARTNER_TEMPERATURE,
    ENV_SCENE_PARTNER_INSTRUCTIONS,
    ENV_SCENE_PARTNER_VAD_THRESHOLD,
    DEFAULT_SCENE_PARTNER_TEMPERATURE,
    DEFAULT_SCENE_PARTNER_INSTRUCTIONS,
    DEFAULT_SCENE_PARTNER_VAD_THRESHOLD,
    ENV_SCENE_PARTNER_TRANSCRIPTION_MODEL,
    ENV_SCENE_PARTNER_VAD_PREFIX_PADDING_MS,
    DEFAULT_SCENE_PARTNER_TRANSCRIPTION_MODEL,
    ENV_SCENE_PARTNER_VAD_SILENCE_DURATION_MS,
    DEFAULT_SCENE_PARTNER_VAD_PREFIX_PADDING_MS,
    DEFAULT_SCENE_PARTNER_VAD_SILENCE_DURATION_MS,
)


def _str_env(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None:
        return default
    v = raw.strip()
    return v if v else default


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _secret_env(name: str) -> str:
    return (os.getenv(name) or "").strip()


def _load_auth_settings() -> AuthSettings:
    return AuthSettings(
        openai_api_key=_secret_env(ENV_OPENAI_API_KEY),
        google_tts_api_key=_secret_env(ENV_GOOGLE_TTS_API_KEY),
    )


def _load_upstream_settings() -> UpstreamSettings:
    base_url = _str_env(ENV_OPENAI_REALTIME_URL, DEFAULT_OPENAI_REALTIME_URL).rstrip("/")
    open_timeout = _float_env(ENV_UPSTREAM_OPEN_TIMEOUT_S, DEFAULT_UPSTREAM_OPEN_TIMEOUT_S)
    if open_timeout <= 0:
        open_timeout = DEFAULT_UPSTREAM_OPEN_TIMEOUT_S
    max_message_bytes = _int_env(ENV_UPSTREAM_MAX_MESSAGE_BYTES, DEFAULT_UPSTREAM_MAX_MESSAGE_BYTES)

    return UpstreamSettings(
        base_url=base_url,
        model=_str_env(ENV_OPENAI_REALTIME_MODEL, DEFAULT_OPENAI_REALTIME_MODEL),
        beta_header=_str_env(ENV_OPENAI_BETA_HEADER, DEFAULT_OPENAI_BETA_HEADER),
        open_timeout_s=open_timeout,
        max_message_bytes=max(0, max_message_bytes),
    )


def _load_session_settings() -> SessionSettings:
    threshold = _float_env(ENV_SCENE_PARTNER_VAD_THRESHOLD, DEFAULT_SCENE_PARTNER_VAD_THRESHOLD)
    if not 0.0 <= threshold <= 1.0:
        raise ValueError(f"{ENV_SCENE_PARTNER_VAD_THRESHOLD} must be between 0.0 and 1.0")

    return SessionSettings(
        instructions=_str_env(ENV_SCENE_PARTNER_INSTRUCTIONS, DEFAULT_SCENE_PARTNER_INSTRUCTIONS),
        voice=_str_env(ENV_SCENE_PARTNER_VOICE, DEFAULT_SCENE_PARTNER_VOICE),
        transcription_model=_str_env(
            ENV_SCENE_PARTNER_TRANSCRIPTION_MODEL, DEFAULT_SCENE_PARTNER_TRANSCRIPTION_MODEL
        ),
        vad_threshold=threshold,
        vad_prefix_padding_ms=max(
            0, _int_env(ENV_SCENE_PARTNER_VAD_PREFIX_PADDING_MS, DEFAULT_SCENE_PARTNER_VAD_PREFIX_PADDING_MS)
        ),
        vad_silence_duration_ms=max(
            0, _int_env(ENV_SCENE_PARTNER_VAD_SILENCE_DURATION_MS, DEFAULT_SCENE_PARTNER_VAD_SILENCE_DURATION_MS)
        ),
        temperature=_float_env(ENV_SCENE_PARTNER_TEMPERATURE, DEFAULT_SCENE_PARTNER_TEMPERATURE),
    )


def _load_tts_settings() -> TtsSettings:
    timeout = _float_env(ENV_TTS_REQUEST_TIMEOUT_S, DEFAULT_TTS_REQUEST_TIMEOUT_S)
    if timeout <= 0:
        timeout = DEFAULT_TTS_REQUEST_TIMEOUT_S
    return TtsSettings(
        google_url=_str_env(ENV_GOOGLE_TTS_URL, DEFAULT_GOOGLE_TTS_URL),
        request_timeout_s=timeout,
    )


def load_settings() -> AppSettings:
    return AppSettings(
        auth=_load_auth_settings(),
        upstream=_load_upstream_settings(),
        session=_load_session_settings(),
        tts=_load_tts_settings(),
    )


__all__ = ["load_settings"]
