"""Read access to the item index for list pages and date facets."""

from typing import Any, Dict, List, Optional, Sequence, Tuple

from config.constants import INDEX_TABLE
from config.logging_config import get_logger
from src.facets.models import FacetSource
from src.facets.query_type import DateComparison

logger = get_logger("index")


class SearchIndex:
    """
    Queries the search_index table.

    Works with anything exposing ``execute(query, params)`` the way a DuckDB
    connection does (DuckDB connections, DatabaseConnection,
    DatabaseService).

    Usage:
        index = SearchIndex(conn)
        values = index.fetch_field_values(source, "created", limit=1000)
        rows, total = index.search(source, [("created", comparison)], page=1)
    """

    def __init__(self, db: Any):
        self.db = db
        self._columns: Optional[List[str]] = None

    @property
    def columns(self) -> List[str]:
        """Column names of the index table."""
        if self._columns is None:
            rows = self.db.execute(
                "SELECT column_name FROM information_schema.columns WHERE table_name = ?",
                [INDEX_TABLE],
            ).fetchall()
            self._columns = [r[0] for r in rows]
        return self._columns

    def validate_field(self, field: str) -> str:
        """
        Ensure a field is an index column before it is used in SQL.

        Raises:
            ValueError: If the field is not a column of the index.
        """
        if field not in self.columns:
            raise ValueError(f"Unknown index field: {field}")
        return field

    def fetch_field_values(self, source: FacetSource, field: str, limit: int) -> List[Any]:
        """
        Read the non-empty values of a field for a facet source.

        Args:
            source: Entity type and bundle to read.
            field: Index column.
            limit: Maximum number of items to read.

        Returns:
            One value per item, at most ``limit + 1`` so callers can tell
            when the cap was exceeded.
        """
        column = self.validate_field(field)
        query = f"""
            SELECT {column}
            FROM {INDEX_TABLE}
            WHERE datasource = ?
            AND bundle = ?
            AND {column} IS NOT NULL
            LIMIT ?
        """
        rows = self.db.execute(query, [source.datasource, source.bundle, limit + 1]).fetchall()
        return [r[0] for r in rows]

    def build_where(
        self,
        source: FacetSource,
        comparisons: Sequence[Tuple[str, DateComparison]] = (),
    ) -> Tuple[str, List[Any]]:
        """Build the WHERE clause for a source and its active date comparisons."""
        conditions = ["datasource = ?", "bundle = ?"]
        params: List[Any] = [source.datasource, source.bundle]

        for field, comparison in comparisons:
            sql, cond_params = comparison.to_sql(self.validate_field(field))
            conditions.append(sql)
            params.extend(cond_params)

        return " AND ".join(conditions), params

    def search(
        self,
        source: FacetSource,
        comparisons: Sequence[Tuple[str, DateComparison]] = (),
        page: int = 1,
        page_size: int = 10,
        sort_field: str = "created",
    ) -> Tuple[List[Dict[str, Any]], int]:
        """
        List items of a source matching every comparison.

        Returns:
            Tuple of (rows for the page, total matching items).
        """
        where_clause, params = self.build_where(source, comparisons)
        sort_column = self.validate_field(sort_field)

        total = self.db.execute(
            f"SELECT COUNT(*) FROM {INDEX_TABLE} WHERE {where_clause}", params
        ).fetchone()[0]

        offset = (page - 1) * page_size
        result = self.db.execute(
            f"""
            SELECT *
            FROM {INDEX_TABLE}
            WHERE {where_clause}
            ORDER BY {sort_column} DESC NULLS LAST, item_id
            LIMIT ? OFFSET ?
            """,
            params + [page_size, offset],
        )
        names = [d[0] for d in result.description]
        rows = [dict(zip(names, row)) for row in result.fetchall()]

        logger.debug(f"Index search on {source.id}: {total} matches")
        return rows, total
