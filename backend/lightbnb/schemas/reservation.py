"""Pydantic v2 response schemas for reservations."""

from datetime import date

from pydantic import BaseModel, ConfigDict


class ReservationResponse(BaseModel):
    """A reservation joined with its property's title, price and rating."""

    id: int
    title: str
    cost_per_night: int
    start_date: date
    average_rating: float | None = None

    model_config = ConfigDict(from_attributes=True)


class ReservationListResponse(BaseModel):
    reservations: list[ReservationResponse]
