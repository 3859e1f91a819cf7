"""FastAPI dependency injection."""

from __future__ import annotations

from svgfixture.config import Settings, settings
from svgfixture.engine.config import EngineConfig


def get_settings() -> Settings:
    return settings


def get_engine_config() -> EngineConfig:
    return settings.engine_config()
