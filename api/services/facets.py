"""Date facet service: wires configured facets to the widget and the index."""

from functools import lru_cache
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from config import config, load_facets
from config.logging_config import get_logger
from src.database.index import SearchIndex
from src.facets import (
    DateComparison,
    DateFilterState,
    DateFormValues,
    DateWidget,
    FacetDefinition,
    ValidationError,
    YearMonthAvailability,
    build_comparison,
    load_facet_definitions,
    resolve,
)
from api.services.database import get_db

logger = get_logger("api.facets")


@lru_cache(maxsize=1)
def get_facets() -> Tuple[FacetDefinition, ...]:
    """Facet definitions from configuration."""
    return tuple(load_facet_definitions(load_facets(config.facets.facets_file)))


class FacetService:
    """Builds, resolves and submits date facets against the item index."""

    def __init__(self, db: Any = None, facets: Optional[Sequence[FacetDefinition]] = None):
        self.db = db if db is not None else get_db()
        self.index = SearchIndex(self.db)
        self.widget = DateWidget(self.index, tz=config.facets.tzinfo)
        self._facets: Dict[str, FacetDefinition] = {
            facet.id: facet for facet in (facets if facets is not None else get_facets())
        }

    @property
    def facets(self) -> List[FacetDefinition]:
        return list(self._facets.values())

    def get_facet(self, facet_id: str) -> Optional[FacetDefinition]:
        return self._facets.get(facet_id)

    def facets_for_source(self, entity_type: str, bundle: str) -> List[FacetDefinition]:
        return [
            facet for facet in self._facets.values()
            if facet.source.entity_type == entity_type and facet.source.bundle == bundle
        ]

    def build_widget(
        self,
        facet: FacetDefinition,
        token: Optional[str],
        parents: Sequence[str] = (),
    ) -> Dict[str, Any]:
        return self.widget.build(facet, [token] if token else [], parents)

    def build_default_value_form(self, facet: FacetDefinition, token: Optional[str]) -> Dict[str, Any]:
        return self.widget.build_default_value_form(facet, [token] if token else [])

    def resolve_state(self, token: Optional[str]) -> DateFilterState:
        return resolve(token, self.widget.tz)

    def year_months(self, facet: FacetDefinition) -> YearMonthAvailability:
        return self.widget.get_year_months(facet)

    def submit(
        self,
        facet: FacetDefinition,
        values: DateFormValues,
        require_value: bool = False,
    ) -> Tuple[Optional[str], List[ValidationError]]:
        """
        Validate submitted values and encode them.

        Returns:
            Tuple of (token or None, validation errors). No token is
            produced while errors remain.
        """
        errors = self.widget.validate(facet.id, values, facet.date_type, require_value)
        if errors:
            logger.debug(f"Rejected submission for facet {facet.id}: {len(errors)} error(s)")
            return None, errors

        tokens = self.widget.prepare_value_for_url(facet, values)
        return (tokens[0] if tokens else None), []

    def active_comparisons(
        self,
        entity_type: str,
        bundle: str,
        query_params: Mapping[str, str],
    ) -> Tuple[List[Tuple[str, DateComparison]], Dict[str, str]]:
        """
        Comparisons for every facet of a source with an active token.

        Returns:
            Tuple of ((field, comparison) pairs, active tokens by URL alias).
            Tokens that do not resolve to a complete filter are dropped.
        """
        comparisons = []
        active = {}
        for facet in self.facets_for_source(entity_type, bundle):
            token = query_params.get(facet.url_alias)
            if not token:
                continue
            comparison = build_comparison(self.resolve_state(token), facet.date_type)
            if comparison is None:
                continue
            comparisons.append((facet.field, comparison))
            active[facet.url_alias] = token
        return comparisons, active
