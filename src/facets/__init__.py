"""Date facet for list pages: URL codec, state resolver, availability and widget."""

from .models import (
    FilterOperator,
    DateType,
    DateWidgetConfig,
    FacetSource,
    FacetDefinition,
    load_facet_definitions,
)
from .state import DateFilterState
from .codec import encode, encode_state, decode, expand_year_month
from .resolver import resolve, resolve_active_items
from .availability import YearMonthAvailability, build_year_month_availability
from .visibility import MonthVisibility
from .query_type import DateComparison, build_comparison
from .interfaces import DateFormatter, IndexReader, TimezoneDateFormatter
from .widget import DateWidget, DateFormValues, ValidationError

__all__ = [
    # Model
    "FilterOperator",
    "DateType",
    "DateWidgetConfig",
    "FacetSource",
    "FacetDefinition",
    "load_facet_definitions",
    "DateFilterState",
    # Codec / resolver
    "encode",
    "encode_state",
    "decode",
    "expand_year_month",
    "resolve",
    "resolve_active_items",
    # Availability
    "YearMonthAvailability",
    "build_year_month_availability",
    "MonthVisibility",
    # Query
    "DateComparison",
    "build_comparison",
    # Widget
    "DateFormatter",
    "IndexReader",
    "TimezoneDateFormatter",
    "DateWidget",
    "DateFormValues",
    "ValidationError",
]
