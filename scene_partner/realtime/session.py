"""Scene partner session bootstrap: the one `session.update` and ready detection."""

from __future__ import annotations

from typing import Any

import orjson

from scene_partner.state.settings import SessionSettings
from scene_partner.config.upstream import UPSTREAM_SESSION_READY_EVENT
from scene_partner.config.session import (
    SESSION_MODALITIES,
    SESSION_AUDIO_FORMAT,
    SESSION_TURN_DETECTION_TYPE,
    SESSION_MAX_RESPONSE_OUTPUT_TOKENS,
)


def build_session_update(settings: SessionSettings) -> dict[str, Any]:
    return {
        "type": "session.update",
        "session": {
            "modalities": list(SESSION_MODALITIES),
            "instructions": settings.instructions,
            "voice": settings.voice,
            "input_audio_format": SESSION_AUDIO_FORMAT,
            "output_audio_format": SESSION_AUDIO_FORMAT,
            "input_audio_transcription": {"model": settings.transcription_model},
            "turn_detection": {
                "type": SESSION_TURN_DETECTION_TYPE,
                "threshold": settings.vad_threshold,
                "prefix_padding_ms": settings.vad_prefix_padding_ms,
                "silence_duration_ms": settings.vad_silence_duration_ms,
            },
            "temperature": settings.temperature,
            "max_response_output_tokens": SESSION_MAX_RESPONSE_OUTPUT_TOKENS,
        },
    }


def is_session_ready(frame: str | bytes) -> bool:
    """Return True if an upstream frame is the session-ready event.

    Only text frames carrying a JSON object qualify; anything else is relayed
    without further inspection.
    """
    if not isinstance(frame, str):
        return False
    try:
        event = orjson.loads(frame)
    except orjson.JSONDecodeError:
        return False
    return isinstance(event, dict) and event.get("type") == UPSTREAM_SESSION_READY_EVENT


__all__ = ["build_session_update", "is_session_ready"]
