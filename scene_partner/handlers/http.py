"""Plain HTTP responses for the relay path (preflight and non-upgrade requests)."""

from __future__ import annotations

from fastapi import Request, Response
from fastapi.responses import PlainTextResponse

from scene_partner.config.http import CORS_HEADERS
from scene_partner.config.websocket import WS_EXPECTED_UPGRADE_BODY, WS_EXPECTED_UPGRADE_STATUS


def preflight_response() -> Response:
    return Response(status_code=200, headers=dict(CORS_HEADERS))


def expected_websocket_response() -> Response:
    return PlainTextResponse(WS_EXPECTED_UPGRADE_BODY, status_code=WS_EXPECTED_UPGRADE_STATUS)


async def handle_relay_http_request(request: Request) -> Response:
    if request.method == "OPTIONS":
        return preflight_response()
    return expected_websocket_response()


__all__ = ["expected_websocket_response", "handle_relay_http_request", "preflight_response"]
