"""Date facets API router."""

from fastapi import APIRouter, HTTPException, Query, Request
from typing import Optional

from api.models.schemas import (
    DateFormSubmission,
    FacetItem,
    FilterStateResponse,
    SubmitResponse,
    YearMonthsResponse,
)
from api.services.facets import FacetService
from src.facets import FacetDefinition

router = APIRouter()


def get_facet_or_404(service: FacetService, facet_id: str) -> FacetDefinition:
    """Look up a configured facet."""
    facet = service.get_facet(facet_id)
    if facet is None:
        raise HTTPException(status_code=404, detail=f"Facet not found: {facet_id}")
    return facet


def parse_parents(parents: Optional[str]) -> list[str]:
    """Parse comma-separated form parents."""
    if not parents:
        return []
    return [p.strip() for p in parents.split(",") if p.strip()]


@router.get("", response_model=list[FacetItem])
async def list_facets():
    """List configured date facets."""
    service = FacetService()
    return [FacetItem.from_definition(facet) for facet in service.facets]


@router.get("/{facet_id}/widget")
async def get_widget(
    facet_id: str,
    request: Request,
    parents: Optional[str] = Query(None, description="Comma-separated form parents"),
):
    """Form descriptor for a facet, prefilled from the active filter in the query string."""
    service = FacetService()
    facet = get_facet_or_404(service, facet_id)
    token = request.query_params.get(facet.url_alias)

    try:
        return service.build_widget(facet, token, parse_parents(parents))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/{facet_id}/default-value-form")
async def get_default_value_form(
    facet_id: str,
    value: Optional[str] = Query(None, description="Stored default filter token"),
):
    """Form descriptor used to configure a facet's default value."""
    service = FacetService()
    facet = get_facet_or_404(service, facet_id)

    try:
        return service.build_default_value_form(facet, value)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/{facet_id}/state", response_model=FilterStateResponse)
async def get_state(facet_id: str, request: Request):
    """Resolve the facet's active filter from the query string."""
    service = FacetService()
    facet = get_facet_or_404(service, facet_id)
    state = service.resolve_state(request.query_params.get(facet.url_alias))
    return FilterStateResponse(**state.to_dict())


@router.get("/{facet_id}/year-months", response_model=YearMonthsResponse)
async def get_year_months(facet_id: str):
    """Years and months present in the indexed data for a facet."""
    service = FacetService()
    facet = get_facet_or_404(service, facet_id)

    try:
        availability = service.year_months(facet)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return YearMonthsResponse(
        facet_id=facet.id,
        year_months=availability.to_payload(),
        truncated=availability.truncated,
    )


@router.post("/{facet_id}/submit", response_model=SubmitResponse)
async def submit_facet(
    facet_id: str,
    submission: DateFormSubmission,
    default_value: bool = Query(False, description="Validate as a default value form"),
):
    """Validate submitted widget values and encode them for the URL."""
    service = FacetService()
    facet = get_facet_or_404(service, facet_id)

    token, errors = service.submit(facet, submission.to_form_values(), require_value=default_value)
    if errors:
        raise HTTPException(
            status_code=422,
            detail=[{"element": e.element, "message": e.message} for e in errors],
        )

    return SubmitResponse(
        token=token,
        query={facet.url_alias: token} if token else {},
    )
