"""
Application configuration — Pydantic Settings.

Loads from .env with strict validation. Single source of truth
for every chart default that is not part of a chart definition.
"""

from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ── Application ──────────────────────────────────────────────
    APP_NAME: str = "chartkit"
    APP_ENV: str = "development"
    DEBUG: bool = False

    # ── API ──────────────────────────────────────────────────────
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8000
    CORS_ORIGINS: List[str] = [
        "http://localhost:5000",
        "http://127.0.0.1:5000",
    ]

    # ── Chart defaults ───────────────────────────────────────────
    NO_DATA_TEXT: str = "No Data"
    Y_AXIS_NUMBER_OF_LABELS: int = 10
    GRID_NUMBER_OF_LINES: int = 10
    ANIMATION_DURATION: float = 1.0
    DOUGHNUT_STROKE_WIDTH: float = 30.0
    VALUE_SPECIFIER: str = "%.0f"

    # ── Logging ──────────────────────────────────────────────────
    LOG_LEVEL: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Cached settings singleton."""
    return Settings()


settings = get_settings()
