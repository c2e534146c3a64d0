"""Logging configuration."""

from __future__ import annotations

import os

LOG_LEVEL = (os.getenv("LOG_LEVEL") or "INFO").strip().upper()
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# websockets/httpx log every frame and request at DEBUG; keep them quiet unless asked.
ENV_SHOW_CLIENT_LOGS = "SHOW_CLIENT_LOGS"
NOISY_CLIENT_LOGGERS: tuple[str, ...] = ("websockets", "httpx", "httpcore")

__all__ = ["LOG_LEVEL", "LOG_FORMAT", "ENV_SHOW_CLIENT_LOGS", "NOISY_CLIENT_LOGGERS"]
