"""Main FastAPI server for the scene partner realtime relay."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response, WebSocket
from fastapi.responses import ORJSONResponse

from scene_partner.state import RuntimeDeps
from scene_partner.config.http import CORS_HEADERS
from scene_partner.config.tts import TTS_ENDPOINT_PATH, COQUI_TTS_ENDPOINT_PATH
from scene_partner.handlers.tts import handle_tts_request, handle_coqui_request
from scene_partner.config.websocket import WS_ENDPOINT_PATH
from scene_partner.runtime.logging import configure_logging
from scene_partner.handlers.http import preflight_response, handle_relay_http_request
from scene_partner.runtime.dependencies import build_runtime_deps
from scene_partner.handlers.websocket.manager import handle_websocket_connection

logger = logging.getLogger(__name__)

_RELAY_HTTP_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def _runtime_deps(app: FastAPI) -> RuntimeDeps:
    runtime_deps = getattr(app.state, "runtime_deps", None)
    if runtime_deps is None:
        raise RuntimeError("Runtime dependencies are not initialized")
    return runtime_deps


@asynccontextmanager
async def _lifespan(app: FastAPI):
    owned = getattr(app.state, "runtime_deps", None) is None
    if owned:
        app.state.runtime_deps = build_runtime_deps()
    logger.info("runtime: ready")
    try:
        yield
    finally:
        deps = getattr(app.state, "runtime_deps", None)
        if owned and deps is not None:
            await deps.shutdown()


def build_app(runtime_deps: RuntimeDeps | None = None) -> FastAPI:
    app = FastAPI(default_response_class=ORJSONResponse, lifespan=_lifespan)
    app.state.runtime_deps = runtime_deps

    @app.get("/")
    async def root() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/healthz")
    async def healthz() -> dict[str, str]:
        return {"status": "ok"}

    @app.api_route(WS_ENDPOINT_PATH, methods=_RELAY_HTTP_METHODS, include_in_schema=False)
    async def relay_http(request: Request) -> Response:
        return await handle_relay_http_request(request)

    @app.websocket(WS_ENDPOINT_PATH)
    async def relay_websocket(websocket: WebSocket) -> None:
        await handle_websocket_connection(websocket, _runtime_deps(app))

    @app.options(TTS_ENDPOINT_PATH, include_in_schema=False)
    async def tts_preflight() -> Response:
        return preflight_response()

    @app.post(TTS_ENDPOINT_PATH)
    async def text_to_speech(request: Request) -> Response:
        status_code, body = await handle_tts_request(await request.body(), _runtime_deps(app))
        return ORJSONResponse(body, status_code=status_code, headers=dict(CORS_HEADERS))

    @app.options(COQUI_TTS_ENDPOINT_PATH, include_in_schema=False)
    async def coqui_preflight() -> Response:
        return preflight_response()

    @app.post(COQUI_TTS_ENDPOINT_PATH)
    async def coqui_tts(request: Request) -> Response:
        status_code, body = await handle_coqui_request(await request.body(), _runtime_deps(app))
        return ORJSONResponse(body, status_code=status_code, headers=dict(CORS_HEADERS))

    return app


configure_logging()

app = build_app()
