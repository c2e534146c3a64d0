"""WebSocket relay endpoint configuration and constants."""

from __future__ import annotations

WS_ENDPOINT_PATH = "/realtime-voice-partner"

# Close codes
WS_CLOSE_NORMAL_CODE = 1000
WS_CLOSE_UPSTREAM_FAILED_CODE = 1011

WS_CLOSE_MISSING_KEY_CODE = WS_CLOSE_NORMAL_CODE
WS_CLOSE_MISSING_KEY_REASON = "API key not configured"
WS_CLOSE_UPSTREAM_FAILED_REASON = "Upstream connection failed"

# Client-facing error event (best effort, sent before closing)
WS_ERROR_EVENT_TYPE = "error"
WS_ERROR_UPSTREAM_FAILED = "OpenAI connection failed"

# Plain HTTP requests that hit the relay path
WS_EXPECTED_UPGRADE_BODY = "Expected WebSocket connection"
WS_EXPECTED_UPGRADE_STATUS = 400

__all__ = [
    "WS_ENDPOINT_PATH",
    "WS_CLOSE_NORMAL_CODE",
    "WS_CLOSE_UPSTREAM_FAILED_CODE",
    "WS_CLOSE_MISSING_KEY_CODE",
    "WS_CLOSE_MISSING_KEY_REASON",
    "WS_CLOSE_UPSTREAM_FAILED_REASON",
    "WS_ERROR_EVENT_TYPE",
    "WS_ERROR_UPSTREAM_FAILED",
    "WS_EXPECTED_UPGRADE_BODY",
    "WS_EXPECTED_UPGRADE_STATUS",
]
