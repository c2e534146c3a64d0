from __future__ import annotations

import json
import dataclasses

import pytest
from websockets.asyncio.server import serve

from scene_partner.errors import UpstreamUnavailableError
from scene_partner.realtime import UpstreamConnector
from scene_partner.runtime.dependencies import build_runtime_deps
from tests.unit.fakes import make_settings


def _connector(url: str = "wss://api.openai.com/v1/realtime?model=m") -> UpstreamConnector:
    return UpstreamConnector(url=url, beta_header="realtime=v1", open_timeout_s=1.0, max_message_bytes=0)


def test_build_headers_carries_bearer_and_beta() -> None:
    assert _connector().build_headers("sk-abc") == {
        "Authorization": "Bearer sk-abc",
        "OpenAI-Beta": "realtime=v1",
    }


@pytest.mark.asyncio
async def test_connect_failure_raises_upstream_unavailable() -> None:
    connector = _connector("http://not-a-websocket-url")
    with pytest.raises(UpstreamUnavailableError) as exc:
        await connector.connect("sk-abc")
    assert exc.value.url == "http://not-a-websocket-url"
    assert "sk-abc" not in str(exc.value)


@pytest.mark.asyncio
async def test_connect_handshake_carries_credentials_and_model() -> None:
    seen: dict[str, object] = {}
    received: list[str | bytes] = []

    def record(connection, request):
        seen["path"] = request.path
        seen["authorization"] = request.headers.get("Authorization")
        seen["beta"] = request.headers.get("OpenAI-Beta")
        return None

    async def handler(ws) -> None:
        await ws.send(json.dumps({"type": "session.created"}))
        received.append(await ws.recv())

    async with serve(handler, "127.0.0.1", 0, process_request=record) as server:
        port = server.sockets[0].getsockname()[1]
        base = make_settings()
        settings = dataclasses.replace(
            base,
            upstream=dataclasses.replace(base.upstream, base_url=f"ws://127.0.0.1:{port}/v1/realtime"),
        )
        deps = build_runtime_deps(settings)
        try:
            conn = await deps.upstream.connect("sk-abc")
            assert json.loads(await conn.recv()) == {"type": "session.created"}
            await conn.send("hello")
            await conn.close()
        finally:
            await deps.shutdown()

    assert seen == {
        "path": f"/v1/realtime?model={base.upstream.model}",
        "authorization": "Bearer sk-abc",
        "beta": "realtime=v1",
    }
    assert received == ["hello"]
