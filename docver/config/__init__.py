"""
Configuration package for docver.
"""

from functools import lru_cache
from typing import Literal, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    DATABASE_URL: str = "sqlite:///./docver.db"
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = None
    POOL_SIZE: Optional[int] = None
    ECHO_SQL: bool = False
    PATH_REWRITE_MODE: Literal["reconstruct", "substitute"] = "reconstruct"

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=True
    )


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
