"""FastAPI dependency injection."""

from __future__ import annotations

from y2kgrad.config import Settings, settings


def get_settings() -> Settings:
    return settings
