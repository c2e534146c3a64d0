"""Runtime settings (dataclasses only)."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class AuthSettings:
    openai_api_key: str
    google_tts_api_key: str


@dataclass(frozen=True, slots=True)
class UpstreamSettings:
    base_url: str
    model: str
    beta_header: str
    open_timeout_s: float
    max_message_bytes: int

    @property
    def url(self) -> str:
        return f"{self.base_url}?model={self.model}"


@dataclass(frozen=True, slots=True)
class SessionSettings:
    instructions: str
    voice: str
    transcription_model: str
    vad_threshold: float
    vad_prefix_padding_ms: int
    vad_silence_duration_ms: int
    temperature: float


@dataclass(frozen=True, slots=True)
class TtsSettings:
    google_url: str
    request_timeout_s: float


@dataclass(frozen=True, slots=True)
class AppSettings:
    auth: AuthSettings
    upstream: UpstreamSettings
    session: SessionSettings
    tts: TtsSettings


__all__ = [
    "AppSettings",
    "AuthSettings",
    "SessionSettings",
    "TtsSettings",
    "UpstreamSettings",
]
