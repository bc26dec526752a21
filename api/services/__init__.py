"""API services."""

from api.services.database import get_db, close_db, DatabaseService
from api.services.facets import FacetService, get_facets
from api.services.lists import ListService

__all__ = ["get_db", "close_db", "DatabaseService", "FacetService", "get_facets", "ListService"]
