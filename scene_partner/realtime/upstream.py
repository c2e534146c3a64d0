"""Outbound websocket to the upstream realtime speech service."""

from __future__ import annotations

import logging
from typing import Protocol
from collections.abc import AsyncIterator

from websockets.asyncio.client import connect
from websockets.exceptions import WebSocketException

from scene_partner.errors import UpstreamUnavailableError

logger = logging.getLogger(__name__)


class UpstreamConnection(Protocol):
    """The subset of a websockets client connection the relay relies on."""

    async def send(self, message: str | bytes) -> None: ...

    async def close(self) -> None: ...

    def __aiter__(self) -> AsyncIterator[str | bytes]: ...


class UpstreamConnector:
    def __init__(
        self,
        *,
        url: str,
        beta_header: str,
        open_timeout_s: float,
        max_message_bytes: int,
    ) -> None:
        self.url = url
        self._beta_header = beta_header
        self._open_timeout_s = float(open_timeout_s)
        # 0 disables the frame size limit.
        self._max_size = int(max_message_bytes) or None

    def build_headers(self, api_key: str) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {api_key}",
            "OpenAI-Beta": self._beta_header,
        }

    async def connect(self, api_key: str) -> UpstreamConnection:
        """Open exactly one upstream connection; failures are not retried."""
        try:
            conn = await connect(
                self.url,
                additional_headers=self.build_headers(api_key),
                open_timeout=self._open_timeout_s,
                max_size=self._max_size,
            )
        except (OSError, TimeoutError, WebSocketException) as exc:
            raise UpstreamUnavailableError(url=self.url, reason=str(exc) or type(exc).__name__) from exc
        logger.info("Connected to upstream realtime API url=%s", self.url)
        return conn


__all__ = ["UpstreamConnection", "UpstreamConnector"]
