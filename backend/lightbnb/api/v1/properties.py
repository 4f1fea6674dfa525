"""Property API routes — search and creation."""

from fastapi import APIRouter, Depends, Query, status

from lightbnb.api.deps import get_store
from lightbnb.config import settings
from lightbnb.database import Store
from lightbnb.schemas.property import (
    PropertyCreate,
    PropertyFilter,
    PropertyListResponse,
    PropertyResponse,
)
from lightbnb.services.properties import add_property
from lightbnb.services.search import get_all_properties

router = APIRouter(prefix="/api/v1/properties", tags=["properties"])


@router.get(
    "",
    response_model=PropertyListResponse,
    summary="Search properties",
)
async def search_properties(
    city: str | None = Query(None),
    owner_id: int | None = Query(None),
    minimum_price_per_night: int | None = Query(None, ge=0),
    maximum_price_per_night: int | None = Query(None, ge=0),
    minimum_rating: float | None = Query(None, ge=0),
    limit: int = Query(settings.default_result_limit, ge=1, le=100),
    store: Store = Depends(get_store),
) -> PropertyListResponse:
    """Return the cheapest matching properties with their average rating."""
    filters = PropertyFilter(
        city=city,
        owner_id=owner_id,
        minimum_price_per_night=minimum_price_per_night,
        maximum_price_per_night=maximum_price_per_night,
        minimum_rating=minimum_rating,
    )
    rows = await get_all_properties(store, filters, limit)
    return PropertyListResponse(
        properties=[PropertyResponse.model_validate(row) for row in rows],
    )


@router.post(
    "",
    response_model=PropertyResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add a property",
)
async def create_property(
    body: PropertyCreate,
    store: Store = Depends(get_store),
) -> PropertyResponse:
    row = await add_property(store, body)
    return PropertyResponse.model_validate(row)
