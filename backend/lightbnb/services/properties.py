"""Property accessors — insertion. Search lives in ``lightbnb.services.search``."""

import logging
from collections.abc import Mapping
from typing import Any

from lightbnb.database import Record, Store
from lightbnb.schemas.property import PropertyCreate

logger = logging.getLogger(__name__)

# Insert order; must match the VALUES placeholders below.
PROPERTY_COLUMNS = (
    "owner_id",
    "title",
    "description",
    "thumbnail_photo_url",
    "cover_photo_url",
    "cost_per_night",
    "street",
    "city",
    "province",
    "post_code",
    "country",
    "parking_spaces",
    "number_of_bathrooms",
    "number_of_bedrooms",
)

_INSERT = f"""
INSERT INTO properties ({", ".join(PROPERTY_COLUMNS)})
VALUES ({", ".join(f"${i}" for i in range(1, len(PROPERTY_COLUMNS) + 1))})
RETURNING *
"""


async def add_property(store: Store, prop: PropertyCreate | Mapping[str, Any]) -> Record:
    """Insert a property and return the stored row, including its new id."""
    if not isinstance(prop, PropertyCreate):
        prop = PropertyCreate.model_validate(prop)

    values = [getattr(prop, column) for column in PROPERTY_COLUMNS]
    try:
        rows = await store.execute(_INSERT, values)
    except Exception:
        logger.exception("Error adding new property")
        raise

    logger.info("Property added: id=%s (owner %s)", rows[0]["id"], prop.owner_id)
    return rows[0]
