"""FastAPI application settings."""

from pathlib import Path
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache

from config import config


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(env_prefix="LIST_PAGES_", extra="ignore")

    # App info
    app_name: str = "List Pages API"
    version: str = "1.0.0"
    debug: bool = False

    # Database
    db_path: Path = Field(default_factory=lambda: config.database.path)

    # CORS - JSON list in LIST_PAGES_CORS_ORIGINS
    cors_origins: list[str] = ["http://localhost:3000", "http://localhost:5173"]

    # Pagination
    default_page_size: int = 10
    max_page_size: int = 100


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
