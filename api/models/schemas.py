"""Pydantic schemas for API request/response validation."""

from pydantic import BaseModel, Field
from typing import Optional
from datetime import date, time

from src.facets import DateFormValues, DateType, FacetDefinition


class FacetItem(BaseModel):
    """A configured date facet."""
    id: str
    name: str
    field: str
    source: str
    url_alias: str
    date_type: DateType

    @classmethod
    def from_definition(cls, facet: FacetDefinition) -> "FacetItem":
        return cls(
            id=facet.id,
            name=facet.name,
            field=facet.field,
            source=facet.source.id,
            url_alias=facet.url_alias,
            date_type=facet.date_type,
        )


class DateFormSubmission(BaseModel):
    """Values submitted through the date widget form."""
    operator: Optional[str] = Field(None, description="Operator code (gt, lt, bt, ym)")
    first_date: Optional[date] = Field(None, description="First date")
    first_time: Optional[time] = Field(None, description="Time of the first date")
    second_date: Optional[date] = Field(None, description="Second date (in between only)")
    second_time: Optional[time] = Field(None, description="Time of the second date")
    year: Optional[int] = Field(None, ge=1, le=9999, description="Year (by year, month)")
    month: Optional[int] = Field(None, ge=1, le=12, description="Month (by year, month)")

    def to_form_values(self) -> DateFormValues:
        return DateFormValues(**self.model_dump())


class FormError(BaseModel):
    """Validation error on a form element."""
    element: str
    message: str


class SubmitResponse(BaseModel):
    """Encoded filter for a submitted form."""
    token: Optional[str] = None
    query: dict[str, str] = {}


class FilterStateResponse(BaseModel):
    """Resolved state of a facet's active filter."""
    operator: Optional[str] = None
    first_date: Optional[str] = None
    second_date: Optional[str] = None
    year: Optional[int] = None
    month: Optional[int] = None
    complete: bool = False


class YearMonthsResponse(BaseModel):
    """Years and months present in the data for a facet."""
    facet_id: str
    year_months: dict[str, dict[str, int]]
    truncated: bool = False


class ListItem(BaseModel):
    """An indexed item in a list page."""
    item_id: str
    datasource: str
    bundle: Optional[str] = None
    title: Optional[str] = None
    created: Optional[int] = None
    published: Optional[int] = None


class PaginationInfo(BaseModel):
    """Pagination metadata."""
    page: int
    page_size: int
    total: int
    total_pages: int


class ListResponse(BaseModel):
    """Response for list page endpoint."""
    items: list[ListItem]
    active_filters: dict[str, str] = {}
    pagination: PaginationInfo
