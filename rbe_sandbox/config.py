"""Application configuration using Pydantic settings."""

from functools import lru_cache
from typing import Literal
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # App Settings
    app_env: str = "development"
    debug: bool = True

    # Simulation defaults
    default_horizon: int = 30
    max_horizon: int = 200

    # Visit counter
    counter_backend: Literal["file", "memory", "database"] = "file"
    visitor_count_file: str = "visitor-count.json"

    # Database (only used by the "database" counter backend)
    database_url: str = "sqlite+aiosqlite:///./rbe_sandbox.db"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
