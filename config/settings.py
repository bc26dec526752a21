"""Application settings and configuration."""

from pathlib import Path
from dataclasses import dataclass, field
from typing import Optional
import os
from zoneinfo import ZoneInfo
from dotenv import load_dotenv
from .constants import DEFAULT_YEAR_MONTH_SCAN_LIMIT

# Load environment variables from .env file
load_dotenv()

# Project root directory
PROJECT_ROOT = Path(__file__).parent.parent


@dataclass
class DatabaseConfig:
    """Database configuration settings."""

    path: Path = field(
        default_factory=lambda: Path(
            os.getenv("LIST_PAGES_DB_PATH", str(PROJECT_ROOT / "data" / "index.duckdb"))
        )
    )
    memory_limit: str = "2GB"
    threads: int = -1  # Use all available threads


@dataclass
class FacetConfig:
    """Date facet configuration settings."""

    timezone: str = field(default_factory=lambda: os.getenv("LIST_PAGES_TIMEZONE", "UTC"))
    year_month_scan_limit: int = field(
        default_factory=lambda: int(os.getenv("LIST_PAGES_YEAR_MONTH_SCAN_LIMIT", DEFAULT_YEAR_MONTH_SCAN_LIMIT))
    )
    facets_file: Optional[Path] = field(
        default_factory=lambda: (
            Path(os.environ["LIST_PAGES_FACETS_FILE"])
            if os.getenv("LIST_PAGES_FACETS_FILE")
            else None
        )
    )

    @property
    def tzinfo(self) -> ZoneInfo:
        """Configured time zone as a tzinfo object."""
        return ZoneInfo(self.timezone)


@dataclass
class AppConfig:
    """Application configuration settings."""

    name: str = field(default_factory=lambda: os.getenv("APP_NAME", "List Pages"))
    version: str = field(default_factory=lambda: os.getenv("APP_VERSION", "1.0.0"))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    log_file: Optional[Path] = field(
        default_factory=lambda: Path(os.environ["LOG_FILE"]) if os.getenv("LOG_FILE") else None
    )


@dataclass
class Config:
    """Main configuration container."""

    database: DatabaseConfig = field(default_factory=DatabaseConfig)
    facets: FacetConfig = field(default_factory=FacetConfig)
    app: AppConfig = field(default_factory=AppConfig)


# Global config instance
config = Config()
