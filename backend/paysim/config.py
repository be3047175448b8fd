"""
Application Configuration — Environment & Settings
Centralizes all config from .env with Pydantic Settings for validation.
"""
from pathlib import Path
from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings

# Resolve paths relative to backend/ directory
BASE_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # --- Core ---
    APP_NAME: str = "Payment Capture Simulator API"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False

    # --- Durable storage ---
    DATABASE_URL: str = f"sqlite:///{BASE_DIR / 'data' / 'paysim.db'}"
    LEDGER_STORAGE_KEY: str = "payments"

    # --- Gateway simulation ---
    GATEWAY_SUCCESS_RATE: float = 0.95
    GATEWAY_LATENCY_SECONDS: float = 1.5
    GATEWAY_SEED: Optional[int] = None  # Fixed seed for reproducible demos

    # --- History ---
    DEFAULT_PAGE_SIZE: int = 5
    PAGE_SIZE_OPTIONS: list[int] = [5, 10, 20, 50]

    # --- Security ---
    CORS_ORIGINS: list[str] = ["*"]

    # --- Logging ---
    LOG_DIR: str = str(BASE_DIR / "logs")
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = str(BASE_DIR / ".env")
        env_file_encoding = "utf-8"
        case_sensitive = True


@lru_cache()
def get_settings() -> Settings:
    """Cached settings singleton."""
    return Settings()
