"""DuckDB connection management for the list pages index."""

import duckdb
from pathlib import Path
from typing import Any, List, Optional
from contextlib import contextmanager

from config import config
from config.constants import INDEX_TABLE
from config.logging_config import get_logger

logger = get_logger("database")


class DatabaseConnection:
    """
    Lazily opened DuckDB connection to the item index.

    Writers (the index loader) open the file read-write and create its
    directory on first use; the API opens it read-only.
    """

    def __init__(self, db_path: Optional[Path] = None, read_only: bool = False):
        """
        Args:
            db_path: Path to database file. Defaults to config setting.
            read_only: Open database in read-only mode.
        """
        self.db_path = Path(db_path or config.database.path)
        self.read_only = read_only
        self._connection: Optional[duckdb.DuckDBPyConnection] = None

    @property
    def is_open(self) -> bool:
        return self._connection is not None

    def connect(self) -> duckdb.DuckDBPyConnection:
        """Open the connection if needed and return it."""
        if self._connection is None:
            if not self.read_only:
                self.db_path.parent.mkdir(parents=True, exist_ok=True)
            self._connection = duckdb.connect(str(self.db_path), read_only=self.read_only)
            self._apply_settings(self._connection)
            mode = "read-only" if self.read_only else "read-write"
            logger.info(f"Opened {mode} index database: {self.db_path}")
        return self._connection

    @staticmethod
    def _apply_settings(conn: duckdb.DuckDBPyConnection) -> None:
        conn.execute(f"SET memory_limit = '{config.database.memory_limit}'")
        if config.database.threads > 0:
            conn.execute(f"SET threads = {config.database.threads}")

    def close(self) -> None:
        if self._connection is not None:
            self._connection.close()
            self._connection = None
            logger.debug(f"Closed index database: {self.db_path}")

    def execute(self, query: str, params: Optional[List[Any]] = None):
        """Run a query, opening the connection on first use."""
        conn = self.connect()
        if params:
            return conn.execute(query, params)
        return conn.execute(query)

    def fetch_one(self, query: str, params: Optional[List[Any]] = None):
        return self.execute(query, params).fetchone()

    def fetch_all(self, query: str, params: Optional[List[Any]] = None):
        return self.execute(query, params).fetchall()

    def has_index(self) -> bool:
        """Whether the item index table exists."""
        row = self.fetch_one(
            "SELECT COUNT(*) FROM information_schema.tables WHERE table_name = ?",
            [INDEX_TABLE],
        )
        return row[0] > 0

    def __enter__(self):
        self.connect()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False


@contextmanager
def get_connection(db_path: Optional[Path] = None, read_only: bool = False):
    """
    Context manager yielding a raw DuckDB connection.

    Example:
        with get_connection() as conn:
            create_index_table(conn)
            insert_items(conn, items)
    """
    db = DatabaseConnection(db_path, read_only)
    try:
        yield db.connect()
    finally:
        db.close()


def get_memory_connection() -> duckdb.DuckDBPyConnection:
    """In-memory DuckDB connection, used by tests."""
    return duckdb.connect(":memory:")
