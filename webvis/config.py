"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    webvis_env: str = "development"
    webvis_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Camera framing: distance added on top of the scenario extent along +z
    camera_padding: float = 3.0

    # Upper bound on scenario text accepted over HTTP
    max_scenario_bytes: int = 1_000_000

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
