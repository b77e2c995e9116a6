"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    pathlang_env: str = "development"
    pathlang_log_level: str = "debug"

    # Parser defaults for the HTTP API
    pathlang_strict_numbers: bool = True
    pathlang_arc_angle_units: str = "degrees"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
