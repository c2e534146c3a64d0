"""Logging initialization."""

from __future__ import annotations

import os
import logging

from scene_partner.config.logging import LOG_LEVEL, LOG_FORMAT, ENV_SHOW_CLIENT_LOGS, NOISY_CLIENT_LOGGERS


def configure_logging() -> None:
    # websockets/httpx are chatty per frame. Keep them tame unless explicitly enabled.
    if (os.getenv(ENV_SHOW_CLIENT_LOGS) or "").strip().lower() not in {"1", "true", "yes"}:
        for name in NOISY_CLIENT_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)


__all__ = ["configure_logging"]
