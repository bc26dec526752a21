"""Database connection service for FastAPI."""

from pathlib import Path
from typing import Optional

from api.config import get_settings
from src.database.connection import DatabaseConnection


class DatabaseService(DatabaseConnection):
    """Read-only connection to the item index shared by API requests."""

    def __init__(self, db_path: Optional[Path] = None):
        super().__init__(db_path or get_settings().db_path, read_only=True)


# Global database instance
_db_service: Optional[DatabaseService] = None


def get_db() -> DatabaseService:
    """Get global database service instance."""
    global _db_service
    if _db_service is None:
        _db_service = DatabaseService()
    return _db_service


def close_db() -> None:
    """Close the global database connection."""
    global _db_service
    if _db_service is not None:
        _db_service.close()
        _db_service = None
