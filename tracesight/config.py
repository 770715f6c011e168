"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    tracesight_env: str = "development"
    tracesight_log_level: str = "info"

    # Junction tolerance used when a request doesn't give one
    default_tolerance: float = 0.1

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
