"""Per connection pair relay state."""

from __future__ import annotations

import enum


class RelayState(enum.Enum):
    """States of one client/upstream connection pair.

    AWAITING_UPSTREAM_READY -> RELAYING happens once, on the first session-ready
    event, and is the only place the session configuration is sent. CLOSED is
    terminal and reachable from either state.
    """

    AWAITING_UPSTREAM_READY = "awaiting_upstream_ready"
    RELAYING = "relaying"
    CLOSED = "closed"


__all__ = ["RelayState"]
