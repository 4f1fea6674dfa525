"""Pydantic v2 request/response schemas for properties and property search."""

from pydantic import BaseModel, ConfigDict, Field

# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------


class PropertyCreate(BaseModel):
    """The 14 listing fields accepted by ``add_property``."""

    owner_id: int
    title: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    thumbnail_photo_url: str = Field(..., max_length=255)
    cover_photo_url: str = Field(..., max_length=255)
    cost_per_night: int = Field(..., ge=0)
    street: str = Field(..., max_length=255)
    city: str = Field(..., max_length=255)
    province: str = Field(..., max_length=255)
    post_code: str = Field(..., max_length=255)
    country: str = Field(..., max_length=255)
    parking_spaces: int = Field(0, ge=0)
    number_of_bathrooms: int = Field(0, ge=0)
    number_of_bedrooms: int = Field(0, ge=0)


class PropertyFilter(BaseModel):
    """Optional search criteria. Every field left unset is ignored.

    The price bounds only apply as a pair: a minimum without a maximum (or the
    other way round) filters nothing.
    """

    city: str | None = None
    owner_id: int | None = None
    minimum_price_per_night: int | None = Field(None, ge=0)
    maximum_price_per_night: int | None = Field(None, ge=0)
    minimum_rating: float | None = Field(None, ge=0)


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------


class PropertyResponse(BaseModel):
    """A listing row, with the averaged review rating when it was computed."""

    id: int
    owner_id: int
    title: str
    description: str | None = None
    thumbnail_photo_url: str
    cover_photo_url: str
    cost_per_night: int
    street: str
    city: str
    province: str
    post_code: str
    country: str
    parking_spaces: int
    number_of_bathrooms: int
    number_of_bedrooms: int
    average_rating: float | None = None

    model_config = ConfigDict(from_attributes=True)


class PropertyListResponse(BaseModel):
    properties: list[PropertyResponse]
