"""Google Cloud text-to-speech client."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from scene_partner.errors import SpeechSynthesisError
from scene_partner.config.tts import TTS_AUDIO_ENCODING, TTS_PROVIDER_GOOGLE

from .voices import GoogleVoice, clamp_speaking_rate

logger = logging.getLogger(__name__)


class GoogleTtsClient:
    def __init__(self, http_client: httpx.AsyncClient, *, url: str, api_key: str) -> None:
        self._http = http_client
        self._url = url
        self._api_key = api_key

    @staticmethod
    def build_request(text: str, voice: GoogleVoice, speaking_rate: float) -> dict[str, Any]:
        return {
            "input": {"text": text},
            "voice": {"languageCode": voice.language_code, "name": voice.name},
            "audioConfig": {
                "audioEncoding": TTS_AUDIO_ENCODING,
                "speakingRate": clamp_speaking_rate(speaking_rate),
            },
        }

    async def synthesize(self, *, text: str, voice: GoogleVoice, speaking_rate: float) -> str:
        """Return base64 MP3 audio for `text`.

        Raises SpeechSynthesisError carrying the status code the endpoint should
        answer with: the upstream status for non-2xx replies, 500 otherwise.
        """
        logger.info("Using Google TTS voice: %s, rate: %s", voice.name, speaking_rate)
        try:
            response = await self._http.post(
                self._url,
                params={"key": self._api_key},
                json=self.build_request(text, voice, speaking_rate),
            )
        except httpx.HTTPError as exc:
            logger.error("Error fetching Google TTS audio: %s", exc)
            raise SpeechSynthesisError(
                status_code=500,
                message=str(exc) or "Unknown Google TTS error",
                provider=TTS_PROVIDER_GOOGLE,
            ) from exc

        if response.is_error:
            logger.error("Google TTS API error: %s", response.text)
            raise SpeechSynthesisError(
                status_code=response.status_code,
                message=f"Google TTS API error: {response.status_code}",
                provider=TTS_PROVIDER_GOOGLE,
                details=response.text,
            )

        try:
            data = response.json()
        except ValueError:
            data = None
        audio = data.get("audioContent") if isinstance(data, dict) else None
        if not audio:
            raise SpeechSynthesisError(
                status_code=500,
                message="No audio content received from Google TTS",
                provider=TTS_PROVIDER_GOOGLE,
            )
        return audio


__all__ = ["GoogleTtsClient"]
