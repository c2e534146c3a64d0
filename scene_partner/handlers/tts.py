"""Text-to-speech request handling (Google and Coqui providers with a browser fallback)."""

from __future__ import annotations

import logging
from typing import Any

import orjson

from scene_partner.state import RuntimeDeps
from scene_partner.errors import SpeechSynthesisError
from scene_partner.speech import CoquiTtsClient, GoogleTtsClient, resolve_google_voice
from scene_partner.config.tts import (
    TTS_DEFAULT_SPEED,
    TTS_PROVIDER_COQUI,
    TTS_PROVIDER_GOOGLE,
    TTS_PROVIDER_BROWSER,
    COQUI_DEFAULT_LANGUAGE,
    COQUI_DEFAULT_VOICE_LABEL,
)

logger = logging.getLogger(__name__)

TtsResult = tuple[int, dict[str, Any]]


def _coerce_speed(raw: Any) -> float:
    if isinstance(raw, bool) or not isinstance(raw, (int, float, str)):
        return TTS_DEFAULT_SPEED
    try:
        speed = float(raw)
    except ValueError:
        return TTS_DEFAULT_SPEED
    # NaN and zero both mean "not given".
    if not speed or speed != speed:
        return TTS_DEFAULT_SPEED
    return speed


def _parse_body(body: bytes) -> dict[str, Any]:
    try:
        payload = orjson.loads(body)
    except orjson.JSONDecodeError as exc:
        raise ValueError(f"invalid JSON: {exc}") from exc
    if not isinstance(payload, dict):
        raise ValueError("request body must be a JSON object")
    return payload


async def _synthesize_google(runtime_deps: RuntimeDeps, text: str, voice: Any, speed: float) -> TtsResult:
    api_key = runtime_deps.settings.auth.google_tts_api_key
    if not api_key:
        logger.error("GOOGLE_TTS_API_KEY is not set")
        return 400, {"error": "Google TTS API key not configured", "provider": TTS_PROVIDER_GOOGLE}

    selected = resolve_google_voice(voice)
    client = GoogleTtsClient(runtime_deps.http_client, url=runtime_deps.settings.tts.google_url, api_key=api_key)
    try:
        audio = await client.synthesize(text=text, voice=selected, speaking_rate=speed)
    except SpeechSynthesisError as exc:
        body: dict[str, Any] = {"error": exc.message, "provider": exc.provider}
        if exc.details is not None:
            body["details"] = exc.details
        return exc.status_code, body
    return 200, {"audioContent": audio, "voice": selected.name, "provider": TTS_PROVIDER_GOOGLE}


async def handle_tts_request(body: bytes, runtime_deps: RuntimeDeps) -> TtsResult:
    try:
        payload = _parse_body(body)
    except ValueError as exc:
        return 400, {"error": str(exc)}

    if payload.get("health"):
        return 200, {
            "status": "healthy",
            "providers": {"google": bool(runtime_deps.settings.auth.google_tts_api_key)},
        }

    text = payload.get("text")
    if not isinstance(text, str) or not text:
        return 400, {"error": "Text is required"}

    voice = payload.get("voice")
    speed = _coerce_speed(payload.get("speed"))

    if payload.get("useGoogle"):
        return await _synthesize_google(runtime_deps, text, voice, speed)

    # Browser speechSynthesis renders the text itself.
    return 200, {
        "audioContent": text,
        "voice": voice or "default",
        "speed": speed,
        "provider": TTS_PROVIDER_BROWSER,
    }


async def handle_coqui_request(body: bytes, runtime_deps: RuntimeDeps) -> TtsResult:
    """Synthesize through a caller-provided Coqui server; every failure answers 400."""
    try:
        payload = _parse_body(body)
    except ValueError as exc:
        return 400, {"error": str(exc)}

    text = payload.get("text")
    if not isinstance(text, str) or not text:
        return 400, {"error": "Text is required"}
    server_url = payload.get("serverUrl")
    if not isinstance(server_url, str) or not server_url:
        return 400, {"error": "Coqui TTS server URL is required"}

    voice = payload.get("voice") or None
    language = payload.get("language") or COQUI_DEFAULT_LANGUAGE
    client = CoquiTtsClient(runtime_deps.http_client, server_url=server_url)
    logger.info("Using Coqui TTS server: %s, language: %s", client.url, language)
    try:
        audio = await client.synthesize(text=text, speaker_wav=voice, language=language)
    except SpeechSynthesisError as exc:
        return exc.status_code, {"error": exc.message}
    return 200, {
        "audioContent": audio,
        "voice": voice or COQUI_DEFAULT_VOICE_LABEL,
        "language": language,
        "provider": TTS_PROVIDER_COQUI,
    }


__all__ = ["handle_coqui_request", "handle_tts_request"]
