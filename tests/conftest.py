"""Pytest configuration and fixtures for List Pages tests."""

import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest
import pandas as pd

PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from src.database import create_index_table, get_memory_connection, insert_items
from src.facets import FacetDefinition, FacetSource, DateWidgetConfig, DateType


def unix(*args) -> int:
    """Unix timestamp of a UTC date and time."""
    return int(datetime(*args, tzinfo=timezone.utc).timestamp())


@pytest.fixture
def sample_items():
    """Sample items DataFrame: four articles and two news items."""
    return pd.DataFrame({
        "item_id": ["n1", "n2", "n3", "n4", "news1", "news2"],
        "datasource": ["entity:node"] * 6,
        "bundle": ["content_type_one"] * 4 + ["news"] * 2,
        "title": ["First", "Second", "Third", "Fourth", "Old news", "New news"],
        "created": [
            "2023-05-10T12:00:00Z",
            "2024-01-15T08:30:00Z",
            "2024-03-10T00:00:00Z",
            "2024-03-10T23:59:59Z",
            "2022-12-31T23:00:00Z",
            "2024-06-01T09:00:00Z",
        ],
        "published": [
            "2023-05-10T12:00:00Z",
            "2024-01-20T10:00:00Z",
            None,
            None,
            "2022-12-31T23:00:00Z",
            "2024-06-01T09:00:00Z",
        ],
    })


@pytest.fixture
def test_db(sample_items):
    """In-memory DuckDB with the item index loaded."""
    conn = get_memory_connection()
    create_index_table(conn)
    insert_items(conn, sample_items)
    yield conn
    conn.close()


@pytest.fixture
def created_facet():
    """Date-only facet on the created field of content_type_one."""
    return FacetDefinition(
        id="created",
        name="Created",
        field="created",
        source=FacetSource("node", "content_type_one"),
    )


@pytest.fixture
def published_facet():
    """Date-and-time facet on the published field of content_type_one."""
    return FacetDefinition(
        id="published",
        name="Published",
        field="published",
        source=FacetSource("node", "content_type_one"),
        widget=DateWidgetConfig(date_type=DateType.DATETIME),
    )


class FakeIndex:
    """IndexReader returning fixed values and recording calls."""

    def __init__(self, values=None):
        self.values = list(values or [])
        self.calls = []

    def fetch_field_values(self, source, field, limit):
        self.calls.append((source, field, limit))
        return self.values[:limit + 1]


@pytest.fixture
def fake_index():
    """Index with values in May 2023, January 2024 and March 2024."""
    return FakeIndex([
        unix(2023, 5, 10, 12, 0, 0),
        unix(2024, 1, 15, 8, 30, 0),
        unix(2024, 3, 10, 0, 0, 0),
    ])


@pytest.fixture
def make_index():
    """Factory for an index with arbitrary values."""
    return FakeIndex
