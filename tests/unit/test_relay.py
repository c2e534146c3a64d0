from __future__ import annotations

import json
import asyncio

import pytest
from websockets.frames import Close
from websockets.exceptions import ConnectionClosedError

from scene_partner.state import RelayState
from scene_partner.realtime import RealtimeRelay, build_session_update
from tests.unit.fakes import FakeUpstream, FakeClientWebSocket, wait_for, make_settings

SESSION_CREATED = json.dumps({"type": "session.created", "session": {"id": "sess_1"}})


def _relay(client: FakeClientWebSocket, upstream: FakeUpstream) -> RealtimeRelay:
    return RealtimeRelay(client, upstream, session_update=build_session_update(make_settings().session))


def _session_updates(frames: list[str | bytes]) -> list[dict]:
    out = []
    for frame in frames:
        if isinstance(frame, str):
            event = json.loads(frame)
            if isinstance(event, dict) and event.get("type") == "session.update":
                out.append(event)
    return out


@pytest.mark.asyncio
@pytest.mark.parametrize("ready_signals", [1, 2, 5])
async def test_relay_sends_configuration_once(ready_signals: int) -> None:
    client = FakeClientWebSocket()
    upstream = FakeUpstream()
    for _ in range(ready_signals):
        upstream.emit(SESSION_CREATED)
    upstream.finish()

    relay = _relay(client, upstream)
    await asyncio.wait_for(relay.run(), timeout=1.0)

    updates = _session_updates(upstream.sent)
    assert len(updates) == 1
    assert updates[0]["session"]["voice"] == "alloy"
    # Every ready signal still reaches the client untouched.
    assert client.sent == [SESSION_CREATED] * ready_signals
    assert relay.state is RelayState.CLOSED


@pytest.mark.asyncio
async def test_relay_configures_before_forwarding_ready_event() -> None:
    client = FakeClientWebSocket()
    upstream = FakeUpstream()
    relay = _relay(client, upstream)
    task = asyncio.create_task(relay.run())

    assert relay.state is RelayState.AWAITING_UPSTREAM_READY
    upstream.emit(SESSION_CREATED)
    await wait_for(lambda: len(client.sent) == 1)

    assert relay.state is RelayState.RELAYING
    assert len(_session_updates(upstream.sent)) == 1

    client.disconnect()
    await asyncio.wait_for(task, timeout=1.0)
    assert relay.state is RelayState.CLOSED


@pytest.mark.asyncio
async def test_relay_ignores_non_ready_frames_while_awaiting() -> None:
    client = FakeClientWebSocket()
    upstream = FakeUpstream()
    frames: list[str | bytes] = ["not json", json.dumps([1, 2]), b"\x01\x02", json.dumps({"type": "error"})]
    for frame in frames:
        upstream.emit(frame)
    upstream.finish()

    relay = _relay(client, upstream)
    await asyncio.wait_for(relay.run(), timeout=1.0)

    assert upstream.sent == []
    assert client.sent == frames


@pytest.mark.asyncio
async def test_relay_forwards_client_frames_verbatim_in_order() -> None:
    client = FakeClientWebSocket()
    upstream = FakeUpstream()
    frames: list[str | bytes] = [
        json.dumps({"type": "input_audio_buffer.append", "audio": "AAAA"}),
        b"\x00\xff\x10",
        "  raw text with spacing  ",
        json.dumps({"type": "response.create"}),
    ]
    for frame in frames:
        if isinstance(frame, bytes):
            client.push_bytes(frame)
        else:
            client.push_text(frame)
    client.disconnect()

    relay = _relay(client, upstream)
    await asyncio.wait_for(relay.run(), timeout=1.0)

    assert upstream.sent == frames
    assert type(upstream.sent[1]) is bytes


@pytest.mark.asyncio
async def test_relay_client_frames_interleave_with_configuration() -> None:
    client = FakeClientWebSocket()
    upstream = FakeUpstream()
    relay = _relay(client, upstream)
    task = asyncio.create_task(relay.run())

    client.push_text("first")
    await wait_for(lambda: upstream.sent == ["first"])
    upstream.emit(SESSION_CREATED)
    await wait_for(lambda: len(upstream.sent) == 2)
    client.push_text("second")
    await wait_for(lambda: len(upstream.sent) == 3)

    client.disconnect()
    await asyncio.wait_for(task, timeout=1.0)

    assert upstream.sent[0] == "first"
    assert json.loads(upstream.sent[1])["type"] == "session.update"
    assert upstream.sent[2] == "second"


@pytest.mark.asyncio
async def test_relay_client_close_closes_upstream() -> None:
    client = FakeClientWebSocket()
    upstream = FakeUpstream()
    relay = _relay(client, upstream)
    task = asyncio.create_task(relay.run())

    client.disconnect()
    await asyncio.wait_for(upstream.closed.wait(), timeout=1.0)
    await asyncio.wait_for(task, timeout=1.0)


@pytest.mark.asyncio
async def test_relay_upstream_close_closes_client() -> None:
    client = FakeClientWebSocket()
    upstream = FakeUpstream()
    relay = _relay(client, upstream)
    task = asyncio.create_task(relay.run())

    upstream.finish()
    await asyncio.wait_for(client.closed.wait(), timeout=1.0)
    await asyncio.wait_for(task, timeout=1.0)
    assert client.close_code == 1000
    assert client.sent == []


@pytest.mark.asyncio
async def test_relay_upstream_error_notifies_client_then_closes() -> None:
    client = FakeClientWebSocket()
    upstream = FakeUpstream()
    upstream.fail(ConnectionClosedError(Close(1011, "internal error"), None))

    relay = _relay(client, upstream)
    await asyncio.wait_for(relay.run(), timeout=1.0)

    assert [json.loads(frame) for frame in client.sent] == [{"type": "error", "error": "OpenAI connection failed"}]
    assert client.closed.is_set()
    assert upstream.closed.is_set()


@pytest.mark.asyncio
async def test_relay_client_transport_error_closes_upstream() -> None:
    client = FakeClientWebSocket()
    upstream = FakeUpstream()
    client.fail(RuntimeError("socket reset"))

    relay = _relay(client, upstream)
    await asyncio.wait_for(relay.run(), timeout=1.0)

    assert upstream.closed.is_set()
    assert relay.state is RelayState.CLOSED


@pytest.mark.asyncio
async def test_relay_cancelled_handler_closes_both_sides() -> None:
    client = FakeClientWebSocket()
    upstream = FakeUpstream()
    relay = _relay(client, upstream)
    task = asyncio.create_task(relay.run())

    upstream.emit(SESSION_CREATED)
    await wait_for(lambda: relay.state is RelayState.RELAYING)
    task.cancel()
    with pytest.raises(asyncio.CancelledError):
        await asyncio.wait_for(task, timeout=1.0)

    assert upstream.closed.is_set()
    assert client.closed.is_set()
    assert client.close_code == 1000
    assert relay.state is RelayState.CLOSED


@pytest.mark.asyncio
async def test_relay_reports_upstream_failure_seen_first_by_client_send() -> None:
    client = FakeClientWebSocket()
    upstream = FakeUpstream()
    abnormal = ConnectionClosedError(Close(1011, "internal error"), None)
    upstream.send_error = abnormal
    relay = _relay(client, upstream)
    task = asyncio.create_task(relay.run())

    client.push_text(json.dumps({"type": "response.create"}))
    # The read side of the socket notices the same failure a moment later.
    asyncio.get_running_loop().call_later(0.005, upstream.fail, abnormal)
    await asyncio.wait_for(task, timeout=1.0)

    assert [json.loads(frame) for frame in client.sent] == [{"type": "error", "error": "OpenAI connection failed"}]
    assert client.closed.is_set()
    assert upstream.closed.is_set()
