"""Application configuration using pydantic-settings."""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Every field can be set with a DICEROLL_ prefix, e.g. DICEROLL_SEED=42.
    """

    model_config = SettingsConfigDict(
        env_prefix="DICEROLL_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Output
    verbose: bool = False  # Show individual rolls by default

    # Randomness
    seed: int | None = None  # Fixed seed makes a whole run reproducible

    # Debug
    debug: bool = False
    log_level: LogLevel = "WARNING"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
