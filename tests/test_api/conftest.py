"""Pytest fixtures for API tests."""

import pytest
from fastapi.testclient import TestClient

import api.services.database as database_service
from api.main import app
from api.services.database import DatabaseService
from src.database import create_index_table, get_connection, insert_items


@pytest.fixture
def index_db(tmp_path, sample_items):
    """DuckDB file with the sample items indexed."""
    db_path = tmp_path / "index.duckdb"
    with get_connection(db_path) as conn:
        create_index_table(conn)
        insert_items(conn, sample_items)
    return db_path


@pytest.fixture
def client(index_db, monkeypatch):
    """Create a TestClient for the FastAPI application over the sample index."""
    service = DatabaseService(index_db)
    monkeypatch.setattr(database_service, "_db_service", service)
    with TestClient(app) as c:
        yield c
    service.close()
