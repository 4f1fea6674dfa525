"""Reservation API routes."""

from fastapi import APIRouter, Depends, Query

from lightbnb.api.deps import get_store
from lightbnb.config import settings
from lightbnb.database import Store
from lightbnb.schemas.reservation import ReservationListResponse, ReservationResponse
from lightbnb.services.reservations import get_all_reservations

router = APIRouter(prefix="/api/v1/reservations", tags=["reservations"])


@router.get(
    "/{guest_id}",
    response_model=ReservationListResponse,
    summary="List a guest's reservations",
)
async def list_reservations(
    guest_id: int,
    limit: int = Query(settings.default_result_limit, ge=1, le=100),
    store: Store = Depends(get_store),
) -> ReservationListResponse:
    """Wrap the accessor's single record (or nothing) in a list."""
    row = await get_all_reservations(store, guest_id, limit)
    reservations = [ReservationResponse.model_validate(row)] if row is not None else []
    return ReservationListResponse(reservations=reservations)
