"""Voice selection for the Google text-to-speech provider."""

from __future__ import annotations

import re
from dataclasses import dataclass

from scene_partner.config.tts import (
    GOOGLE_VOICE_ALIASES,
    TTS_MAX_SPEAKING_RATE,
    TTS_MIN_SPEAKING_RATE,
    GOOGLE_DEFAULT_VOICE_ALIAS,
)

# Direct Google voice names: en-US-Standard-C, en-GB-Wavenet-A, en-US-Neural2-J, ...
_GOOGLE_VOICE_NAME_RE = re.compile(r"^[a-z]{2}-[A-Z]{2}-")


@dataclass(frozen=True, slots=True)
class GoogleVoice:
    name: str
    language_code: str


def resolve_google_voice(voice: object) -> GoogleVoice:
    if isinstance(voice, str) and _GOOGLE_VOICE_NAME_RE.match(voice):
        language_code = "-".join(voice.split("-")[:2])
        return GoogleVoice(name=voice, language_code=language_code)

    alias = voice if isinstance(voice, str) and voice in GOOGLE_VOICE_ALIASES else GOOGLE_DEFAULT_VOICE_ALIAS
    name, language_code = GOOGLE_VOICE_ALIASES[alias]
    return GoogleVoice(name=name, language_code=language_code)


def clamp_speaking_rate(rate: float) -> float:
    return max(TTS_MIN_SPEAKING_RATE, min(TTS_MAX_SPEAKING_RATE, rate))


__all__ = ["GoogleVoice", "clamp_speaking_rate", "resolve_google_voice"]
