"""API Pydantic models."""

from api.models.schemas import (
    FacetItem,
    DateFormSubmission,
    FormError,
    SubmitResponse,
    FilterStateResponse,
    YearMonthsResponse,
    ListItem,
    ListResponse,
    PaginationInfo,
)

__all__ = [
    "FacetItem",
    "DateFormSubmission",
    "FormError",
    "SubmitResponse",
    "FilterStateResponse",
    "YearMonthsResponse",
    "ListItem",
    "ListResponse",
    "PaginationInfo",
]
