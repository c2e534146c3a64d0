"""Shared error types for the scene partner server."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class UpstreamUnavailableError(Exception):
    """Raised when the upstream realtime websocket cannot be opened."""

    url: str
    reason: str

    def __str__(self) -> str:
        return f"upstream {self.url} unavailable: {self.reason}"


@dataclass(frozen=True, slots=True)
class SpeechSynthesisError(Exception):
    """Raised when the speech provider fails; carries the HTTP response to relay back."""

    status_code: int
    message: str
    provider: str
    details: str | None = None

    def __str__(self) -> str:
        return self.message


__all__ = ["SpeechSynthesisError", "UpstreamUnavailableError"]
