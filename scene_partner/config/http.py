"""Cross-origin headers shared by every public endpoint."""

from __future__ import annotations

CORS_HEADERS: dict[str, str] = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
}

__all__ = ["CORS_HEADERS"]
