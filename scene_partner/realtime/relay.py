"""Bidirectional relay between one client websocket and one upstream websocket."""

from __future__ import annotations

import asyncio
import logging
import contextlib
from typing import Any

import orjson
from fastapi import WebSocket
from websockets.exceptions import ConnectionClosed, ConnectionClosedError

from scene_partner.state import RelayState
from scene_partner.config.websocket import WS_CLOSE_NORMAL_CODE, WS_ERROR_UPSTREAM_FAILED
from scene_partner.handlers.websocket.errors import send_error_event, safe_send_frame

from .session import is_session_ready
from .upstream import UpstreamConnection

logger = logging.getLogger(__name__)


class RealtimeRelay:
    """Owns one connection pair from the first relayed frame until both sides are closed.

    Frames are forwarded verbatim in both directions. Upstream frames are only
    inspected while awaiting the session-ready event; the session configuration
    is sent from that state alone, so it goes out at most once per pair.
    """

    def __init__(
        self,
        client: WebSocket,
        upstream: UpstreamConnection,
        *,
        session_update: dict[str, Any],
    ) -> None:
        self._client = client
        self._upstream = upstream
        self._session_update = orjson.dumps(session_update).decode("utf-8")
        self._state = RelayState.AWAITING_UPSTREAM_READY

    @property
    def state(self) -> RelayState:
        return self._state

    async def run(self) -> None:
        client_task = asyncio.create_task(self._client_to_upstream(), name="relay-client-to-upstream")
        upstream_task = asyncio.create_task(self._upstream_to_client(), name="relay-upstream-to-client")
        tasks = (client_task, upstream_task)
        try:
            done, _ = await asyncio.wait(tasks, return_when=asyncio.FIRST_COMPLETED)
            if client_task in done and _upstream_went_away(client_task):
                # Let the upstream side report its close to the client first.
                await asyncio.wait((upstream_task,))
        finally:
            self._state = RelayState.CLOSED
            for task in tasks:
                task.cancel()
            # Shielded so a cancelled handler still closes both endpoints.
            await asyncio.shield(asyncio.ensure_future(self._close_both()))
            # asyncio.wait leaves child errors on the tasks instead of raising them here.
            await asyncio.wait(tasks)
            for task in tasks:
                if not task.cancelled() and task.exception() is not None:
                    logger.warning("%s ended with error: %r", task.get_name(), task.exception())

    async def _configure(self) -> None:
        if self._state is not RelayState.AWAITING_UPSTREAM_READY:
            return
        self._state = RelayState.RELAYING
        logger.info("Session created, sending configuration")
        await self._upstream.send(self._session_update)

    async def _client_to_upstream(self) -> bool:
        """Forward client frames; returns False when the upstream refused a send."""
        while self._state is not RelayState.CLOSED:
            message = await self._client.receive()
            if message["type"] == "websocket.disconnect":
                logger.info("Client WebSocket closed code=%s", message.get("code"))
                return True
            frame = message.get("text")
            if frame is None:
                frame = message.get("bytes")
            if frame is None:
                continue
            try:
                await self._upstream.send(frame)
            except ConnectionClosed:
                logger.debug("dropping client frame; upstream already closed")
                return False
        return True

    async def _upstream_to_client(self) -> None:
        try:
            async for frame in self._upstream:
                if self._state is RelayState.AWAITING_UPSTREAM_READY and is_session_ready(frame):
                    await self._configure()
                if not await safe_send_frame(self._client, frame):
                    return
        except ConnectionClosedError as exc:
            logger.error("Upstream WebSocket error: %s", exc)
            await send_error_event(self._client, WS_ERROR_UPSTREAM_FAILED)
            return
        logger.info("Upstream WebSocket closed")

    async def _close_both(self) -> None:
        try:
            await self._close_upstream()
        finally:
            await self._close_client()

    async def _close_upstream(self) -> None:
        with contextlib.suppress(Exception):
            await self._upstream.close()

    async def _close_client(self) -> None:
        with contextlib.suppress(Exception):
            await self._client.close(code=WS_CLOSE_NORMAL_CODE)


def _upstream_went_away(task: asyncio.Task) -> bool:
    return not task.cancelled() and task.exception() is None and task.result() is False


__all__ = ["RealtimeRelay"]
