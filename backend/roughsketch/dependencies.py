"""FastAPI dependency injection."""

from __future__ import annotations

from roughsketch.config import Settings, settings
from roughsketch.engine.config import EngineConfig
from roughsketch.engine.generator import Engine

_engine: Engine | None = None


def get_settings() -> Settings:
    return settings


def get_engine() -> Engine:
    """Process-wide engine, built on first use.

    Endpoints that touch it are ``async def`` so every call runs on the
    event loop thread, which is the engine's single owner.
    """
    global _engine
    if _engine is None:
        _engine = Engine(EngineConfig.from_settings(settings))
    return _engine
