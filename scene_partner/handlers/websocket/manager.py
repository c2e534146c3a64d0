"""Primary WebSocket connection handler orchestration."""

from __future__ import annotations

import logging

from fastapi import WebSocket

from scene_partner.state import RuntimeDeps
from scene_partner.errors import UpstreamUnavailableError
from scene_partner.realtime import RealtimeRelay, build_session_update
from scene_partner.config.websocket import (
    WS_ERROR_UPSTREAM_FAILED,
    WS_CLOSE_MISSING_KEY_CODE,
    WS_CLOSE_MISSING_KEY_REASON,
    WS_CLOSE_UPSTREAM_FAILED_CODE,
    WS_CLOSE_UPSTREAM_FAILED_REASON,
)

from .errors import close_connection, send_error_event, reject_connection

logger = logging.getLogger(__name__)


async def handle_websocket_connection(ws: WebSocket, runtime_deps: RuntimeDeps) -> None:
    settings = runtime_deps.settings
    api_key = settings.auth.openai_api_key
    if not api_key:
        logger.error("OPENAI_API_KEY not found; refusing realtime connection")
        await reject_connection(ws, close_code=WS_CLOSE_MISSING_KEY_CODE, reason=WS_CLOSE_MISSING_KEY_REASON)
        return

    await ws.accept()
    logger.info("Client WebSocket connection opened")

    try:
        upstream = await runtime_deps.upstream.connect(api_key)
    except UpstreamUnavailableError as exc:
        logger.error("Upstream connection failed: %s", exc)
        await send_error_event(ws, WS_ERROR_UPSTREAM_FAILED)
        await close_connection(ws, code=WS_CLOSE_UPSTREAM_FAILED_CODE, reason=WS_CLOSE_UPSTREAM_FAILED_REASON)
        return

    relay = RealtimeRelay(ws, upstream, session_update=build_session_update(settings.session))
    try:
        await relay.run()
    finally:
        logger.info("Realtime relay finished state=%s", relay.state.value)


__all__ = ["handle_websocket_connection"]
