"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings

from svgfixture.engine.config import MAX_POINTS, EngineConfig


class Settings(BaseSettings):
    svgfixture_env: str = "development"
    svgfixture_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Engine limits
    max_points: int = MAX_POINTS
    curve_subdivisions: int = 0

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    def engine_config(self) -> EngineConfig:
        return EngineConfig(max_points=self.max_points, curve_subdivisions=self.curve_subdivisions)


settings = Settings()
