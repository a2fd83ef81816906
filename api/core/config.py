"""
Process-wide settings that are not owned by a single feature.
"""

from __future__ import annotations

import os

DEFAULT_FRONTEND_URL = "http://localhost:5173"


def frontend_url() -> str:
    return (os.environ.get("FRONTEND_URL", "").strip() or DEFAULT_FRONTEND_URL).rstrip("/")


def cors_origins() -> list[str]:
    return [frontend_url()]


def log_level() -> str:
    return os.environ.get("LOG_LEVEL", "INFO").strip().upper() or "INFO"
