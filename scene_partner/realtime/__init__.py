from scene_partner.state import RelayState

from .relay import RealtimeRelay
from .upstream import UpstreamConnector, UpstreamConnection
from .session import is_session_ready, build_session_update

__all__ = [
    "RealtimeRelay",
    "RelayState",
    "UpstreamConnection",
    "UpstreamConnector",
    "build_session_update",
    "is_session_ready",
]
