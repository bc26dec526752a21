"""Database module for the DuckDB item index."""

from .connection import (
    DatabaseConnection,
    get_connection,
    get_memory_connection,
)
from .schema import (
    create_index_table,
    insert_items,
    get_table_counts,
    INDEX_COLUMNS,
    DATE_COLUMNS,
)
from .index import SearchIndex

__all__ = [
    # Connection
    "DatabaseConnection",
    "get_connection",
    "get_memory_connection",
    # Schema
    "create_index_table",
    "insert_items",
    "get_table_counts",
    "INDEX_COLUMNS",
    "DATE_COLUMNS",
    # Index
    "SearchIndex",
]
