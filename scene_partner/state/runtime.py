"""Typed runtime state objects for dependency wiring."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    import httpx

    from scene_partner.state.settings import AppSettings
    from scene_partner.realtime.upstream import UpstreamConnector


@dataclass(slots=True)
class RuntimeDeps:
    settings: AppSettings
    upstream: UpstreamConnector
    http_client: httpx.AsyncClient

    async def shutdown(self) -> None:
        try:
            await self.http_client.aclose()
        except Exception:
            logger.exception("runtime shutdown failed")


__all__ = ["RuntimeDeps"]
