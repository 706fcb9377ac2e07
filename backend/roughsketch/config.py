"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    roughsketch_env: str = "development"
    roughsketch_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Base seed mixed into every per-drawing seed
    default_seed: int = 0

    # Cache capacities
    drawing_cache_size: int = 100
    generator_cache_size: int = 10

    # Stroke-to-fill flattening
    flatness_tolerance: float = 0.25
    max_flatten_depth: int = 10
    max_sample_spacing: float = 4.0
    miter_limit: float = 4.0

    # Scribble ray casting
    dedupe_tolerance: float = 0.5

    # Full-canvas shapes
    canvas_inset: float = 4.0

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
