"""DuckDB schema for the list pages item index.

Items are stored one row per indexed entity. Date fields hold unix
timestamps, the way the search index stores dates.
"""

from typing import Dict

import duckdb
import pandas as pd

from config.constants import INDEX_TABLE
from config.logging_config import get_logger

logger = get_logger("schema")

CREATE_SEARCH_INDEX = f"""
CREATE TABLE IF NOT EXISTS {INDEX_TABLE} (
    item_id VARCHAR PRIMARY KEY,
    datasource VARCHAR NOT NULL,      -- entity:<entity_type>
    bundle VARCHAR,
    title VARCHAR,
    created BIGINT,                   -- unix timestamp
    published BIGINT                  -- unix timestamp
)
"""

INDEX_COLUMNS = ["item_id", "datasource", "bundle", "title", "created", "published"]

DATE_COLUMNS = ["created", "published"]

EPOCH = pd.Timestamp("1970-01-01", tz="UTC")


def create_index_table(conn: duckdb.DuckDBPyConnection) -> None:
    """Create the item index table."""
    conn.execute(CREATE_SEARCH_INDEX)
    logger.info(f"Created table {INDEX_TABLE}")


def _to_unix(series: pd.Series) -> pd.Series:
    """Convert a date column to unix seconds; numeric columns pass through."""
    if pd.api.types.is_numeric_dtype(series):
        return series.astype("Int64")
    stamps = pd.to_datetime(series, utc=True, errors="coerce", format="ISO8601")
    seconds = (stamps - EPOCH) // pd.Timedelta(seconds=1)
    return seconds.astype("Int64")


def insert_items(conn: duckdb.DuckDBPyConnection, items: pd.DataFrame) -> int:
    """
    Insert or replace items in the index.

    Args:
        conn: Database connection.
        items: DataFrame with the index columns. Date columns may be unix
            timestamps or anything pandas parses as a date.

    Returns:
        Number of rows written.
    """
    missing = [col for col in ("item_id", "datasource") if col not in items.columns]
    if missing:
        raise ValueError(f"Items are missing required columns: {', '.join(missing)}")

    frame = items.reindex(columns=INDEX_COLUMNS)
    for col in DATE_COLUMNS:
        frame[col] = _to_unix(frame[col])

    conn.register("items_frame", frame)
    try:
        conn.execute(
            f"INSERT OR REPLACE INTO {INDEX_TABLE} ({', '.join(INDEX_COLUMNS)}) "
            f"SELECT {', '.join(INDEX_COLUMNS)} FROM items_frame"
        )
    finally:
        conn.unregister("items_frame")

    logger.info(f"Indexed {len(frame)} items")
    return len(frame)


def get_table_counts(conn: duckdb.DuckDBPyConnection) -> Dict[str, int]:
    """Count indexed items per datasource and bundle."""
    rows = conn.execute(
        f"SELECT datasource, bundle, COUNT(*) FROM {INDEX_TABLE} GROUP BY 1, 2 ORDER BY 1, 2"
    ).fetchall()
    return {f"{datasource}:{bundle}": count for datasource, bundle, count in rows}
