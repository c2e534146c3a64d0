"""Client for a self-hosted Coqui TTS server."""

from __future__ import annotations

import base64
import logging
from typing import Any

import httpx

from scene_partner.errors import SpeechSynthesisError
from scene_partner.config.tts import COQUI_TTS_API_PATH, TTS_PROVIDER_COQUI

logger = logging.getLogger(__name__)


class CoquiTtsClient:
    def __init__(self, http_client: httpx.AsyncClient, *, server_url: str) -> None:
        self._http = http_client
        self._url = server_url.rstrip("/") + COQUI_TTS_API_PATH

    @property
    def url(self) -> str:
        return self._url

    @staticmethod
    def build_request(text: str, speaker_wav: str | None, language: str) -> dict[str, Any]:
        return {
            "text": text,
            "speaker_wav": speaker_wav,
            "language": language,
            "split_sentences": True,
        }

    async def synthesize(self, *, text: str, speaker_wav: str | None, language: str) -> str:
        """Return the server's audio bytes as base64.

        Every failure is raised as SpeechSynthesisError with status 400.
        """
        try:
            response = await self._http.post(self._url, json=self.build_request(text, speaker_wav, language))
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.error("Error reaching Coqui TTS server %s: %s", self._url, exc)
            raise SpeechSynthesisError(
                status_code=400,
                message=str(exc) or "Coqui TTS server unreachable",
                provider=TTS_PROVIDER_COQUI,
            ) from exc

        if response.is_error:
            logger.error("Coqui TTS API error: %s", response.text)
            raise SpeechSynthesisError(
                status_code=400,
                message=f"Coqui TTS API error: {response.status_code}",
                provider=TTS_PROVIDER_COQUI,
                details=response.text,
            )
        return base64.b64encode(response.content).decode("ascii")


__all__ = ["CoquiTtsClient"]
