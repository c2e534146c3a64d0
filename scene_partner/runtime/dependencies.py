"""Runtime dependency construction (settings, upstream connector, HTTP client)."""

from __future__ import annotations

import logging

import httpx

from scene_partner.state import RuntimeDeps
from scene_partner.state.settings import AppSettings
from scene_partner.realtime.upstream import UpstreamConnector

from .settings import load_settings

logger = logging.getLogger(__name__)


def build_runtime_deps(settings: AppSettings | None = None) -> RuntimeDeps:
    settings = settings or load_settings()

    if not settings.auth.openai_api_key:
        # Not fatal for the process: the relay refuses each connection instead.
        logger.warning("OPENAI_API_KEY is not set; realtime connections will be refused")

    upstream = UpstreamConnector(
        url=settings.upstream.url,
        beta_header=settings.upstream.beta_header,
        open_timeout_s=settings.upstream.open_timeout_s,
        max_message_bytes=settings.upstream.max_message_bytes,
    )
    http_client = httpx.AsyncClient(timeout=settings.tts.request_timeout_s)

    return RuntimeDeps(settings=settings, upstream=upstream, http_client=http_client)


__all__ = ["RuntimeDeps", "build_runtime_deps"]
