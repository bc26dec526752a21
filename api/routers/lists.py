"""List pages API router."""

from fastapi import APIRouter, HTTPException, Query, Request

from api.models.schemas import ListResponse
from api.services.lists import ListService

router = APIRouter()


@router.get("/{entity_type}/{bundle}", response_model=ListResponse)
async def list_items(
    entity_type: str,
    bundle: str,
    request: Request,
    page: int = Query(1, ge=1, description="Page number"),
    page_size: int = Query(10, ge=1, le=1000, description="Results per page"),
):
    """List items of an entity type and bundle, filtered by the active date facets."""
    service = ListService()

    try:
        return service.list_items(
            entity_type,
            bundle,
            request.query_params,
            page=page,
            page_size=page_size,
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
