"""Send/close helpers for the client side of the relay."""

from __future__ import annotations

import logging

import orjson
from fastapi import WebSocket, WebSocketDisconnect

from scene_partner.config.websocket import WS_ERROR_EVENT_TYPE

logger = logging.getLogger(__name__)


def build_error_event(message: str) -> dict[str, str]:
    return {"type": WS_ERROR_EVENT_TYPE, "error": message}


async def safe_send_frame(ws: WebSocket, frame: str | bytes) -> bool:
    try:
        if isinstance(frame, bytes):
            await ws.send_bytes(frame)
        else:
            await ws.send_text(frame)
    except WebSocketDisconnect:
        return False
    except Exception:
        logger.debug("WebSocket send failed", exc_info=True)
        return False
    return True


async def send_error_event(ws: WebSocket, message: str) -> bool:
    return await safe_send_frame(ws, orjson.dumps(build_error_event(message)).decode("utf-8"))


async def close_connection(ws: WebSocket, *, code: int, reason: str) -> None:
    try:
        await ws.close(code=code, reason=reason)
    except Exception:
        logger.debug("WebSocket close failed", exc_info=True)


async def reject_connection(ws: WebSocket, *, close_code: int, reason: str) -> None:
    # Accept so the close code and reason reach the client, then close.
    try:
        await ws.accept()
    except Exception:
        # If accept fails, nothing else to do.
        return
    await close_connection(ws, code=close_code, reason=reason)


__all__ = [
    "build_error_event",
    "close_connection",
    "reject_connection",
    "safe_send_frame",
    "send_error_event",
]
