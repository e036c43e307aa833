"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    y2kgrad_env: str = "development"
    y2kgrad_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Upper bound on cols * rows accepted by the API
    max_cells: int = 1_000_000

    # Output checks
    validate_output: bool = False
    verify_merge: bool = False

    # Export
    download_filename: str = "y2k-gradient.svg"
    default_selector: str = "#gradient-target"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
