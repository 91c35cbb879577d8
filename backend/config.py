"""Environment-driven application settings (``COMPOUND_*`` variables)."""

from __future__ import annotations

from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict

from backend.models import Target


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="COMPOUND_")

    app_name: str = "compound-interest-solver"

    # API configuration
    host: str = "127.0.0.1"
    port: int = 5000
    debug: bool = False
    cors_origins: List[str] = [
        "http://localhost:3000",
        "http://localhost:5173",
        "http://127.0.0.1:3000",
        "http://127.0.0.1:5173",
    ]

    # Logging configuration
    log_level: str = "INFO"
    log_format: str = "json"  # json or text

    # Form configuration
    default_target: Target = Target.AMOUNT


@lru_cache
def get_settings() -> Settings:
    return Settings()
