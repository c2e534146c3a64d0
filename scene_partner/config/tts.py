"""Text-to-speech endpoint configuration."""

from __future__ import annotations

TTS_ENDPOINT_PATH = "/text-to-speech"
COQUI_TTS_ENDPOINT_PATH = "/coqui-tts"

ENV_GOOGLE_TTS_URL = "GOOGLE_TTS_URL"
ENV_TTS_REQUEST_TIMEOUT_S = "TTS_REQUEST_TIMEOUT_S"

DEFAULT_GOOGLE_TTS_URL = "https://texttospeech.googleapis.com/v1/text:synthesize"
DEFAULT_TTS_REQUEST_TIMEOUT_S = 30.0

TTS_PROVIDER_GOOGLE = "google"
TTS_PROVIDER_BROWSER = "browser"
TTS_PROVIDER_COQUI = "coqui"
TTS_AUDIO_ENCODING = "MP3"

TTS_DEFAULT_SPEED = 1.0
TTS_MIN_SPEAKING_RATE = 0.25
TTS_MAX_SPEAKING_RATE = 4.0

# OpenAI-style voice aliases mapped onto Google standard voices.
GOOGLE_VOICE_ALIASES: dict[str, tuple[str, str]] = {
    "alloy": ("en-US-Standard-B", "en-US"),
    "echo": ("en-US-Standard-C", "en-US"),
    "fable": ("en-US-Standard-D", "en-US"),
    "onyx": ("en-US-Standard-A", "en-US"),
    "nova": ("en-US-Standard-E", "en-US"),
    "shimmer": ("en-US-Standard-F", "en-US"),
    "ember": ("en-US-Standard-G", "en-US"),
}
GOOGLE_DEFAULT_VOICE_ALIAS = "echo"

# Coqui TTS servers are self-hosted; the caller supplies the base URL.
COQUI_TTS_API_PATH = "/api/tts"
COQUI_DEFAULT_LANGUAGE = "en"
COQUI_DEFAULT_VOICE_LABEL = "default"

__all__ = [
    "TTS_ENDPOINT_PATH",
    "COQUI_TTS_ENDPOINT_PATH",
    "ENV_GOOGLE_TTS_URL",
    "ENV_TTS_REQUEST_TIMEOUT_S",
    "DEFAULT_GOOGLE_TTS_URL",
    "DEFAULT_TTS_REQUEST_TIMEOUT_S",
    "TTS_PROVIDER_GOOGLE",
    "TTS_PROVIDER_BROWSER",
    "TTS_PROVIDER_COQUI",
    "TTS_AUDIO_ENCODING",
    "TTS_DEFAULT_SPEED",
    "TTS_MIN_SPEAKING_RATE",
    "TTS_MAX_SPEAKING_RATE",
    "GOOGLE_VOICE_ALIASES",
    "GOOGLE_DEFAULT_VOICE_ALIAS",
    "COQUI_TTS_API_PATH",
    "COQUI_DEFAULT_LANGUAGE",
    "COQUI_DEFAULT_VOICE_LABEL",
]
