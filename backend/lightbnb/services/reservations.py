"""Reservation accessors."""

import logging

from lightbnb.config import settings
from lightbnb.database import Record, Store, first_or_none

logger = logging.getLogger(__name__)

_SELECT_FOR_GUEST = """
SELECT reservations.id, properties.title, properties.cost_per_night,
       reservations.start_date, AVG(rating) AS average_rating
FROM reservations
JOIN properties ON reservations.property_id = properties.id
JOIN property_reviews ON properties.id = property_reviews.property_id
WHERE reservations.guest_id = $1
GROUP BY properties.id, reservations.id
ORDER BY reservations.start_date
LIMIT $2;
"""


async def get_all_reservations(
    store: Store, guest_id: int, limit: int | None = None
) -> Record | None:
    """Return the earliest reservation of a guest, or None if there is none.

    The statement selects up to ``limit`` reservations ordered by start date,
    but only the first row is handed back. Existing callers depend on the
    single-record shape, so the remaining rows are dropped here.
    """
    if limit is None:
        limit = settings.default_result_limit
    if limit < 1:
        raise ValueError(f"limit must be a positive integer, got {limit!r}")

    try:
        rows = await store.fetch(_SELECT_FOR_GUEST, [guest_id, limit])
    except Exception:
        logger.exception("Error retrieving reservations for guest %s", guest_id)
        raise
    return first_or_none(rows)
