"""List page service: paginated items of a source filtered by its date facets."""

from typing import Any, Mapping, Optional

from api.config import get_settings
from api.services.database import get_db
from api.services.facets import FacetService
from src.database.index import SearchIndex
from src.facets import FacetSource


class ListService:
    """Executes list page queries against the item index."""

    def __init__(self, db: Any = None, facet_service: Optional[FacetService] = None):
        self.db = db if db is not None else get_db()
        self.index = SearchIndex(self.db)
        self.facet_service = facet_service or FacetService(self.db)

    def list_items(
        self,
        entity_type: str,
        bundle: str,
        query_params: Mapping[str, str],
        page: int = 1,
        page_size: Optional[int] = None,
    ) -> dict:
        """
        List items of an entity type and bundle.

        Raises:
            ValueError: If a facet points at a field missing from the index.
        """
        settings = get_settings()
        page_size = min(page_size or settings.default_page_size, settings.max_page_size)

        source = FacetSource(entity_type=entity_type, bundle=bundle)
        comparisons, active = self.facet_service.active_comparisons(entity_type, bundle, query_params)
        rows, total = self.index.search(source, comparisons, page=page, page_size=page_size)

        return {
            "items": rows,
            "active_filters": active,
            "pagination": {
                "page": page,
                "page_size": page_size,
                "total": total,
                "total_pages": (total + page_size - 1) // page_size,
            },
        }
