"""User accessors — lookup by email or id, and insertion."""

import logging
from collections.abc import Mapping
from typing import Any

from lightbnb.database import Record, Store, first_or_none
from lightbnb.schemas.user import UserCreate

logger = logging.getLogger(__name__)

_SELECT_BY_EMAIL = """
SELECT *
FROM users
WHERE LOWER(email) = LOWER($1)
"""

_SELECT_BY_ID = """
SELECT *
FROM users
WHERE id = $1
"""

_INSERT = """
INSERT INTO users (name, email, password)
VALUES ($1, $2, $3)
RETURNING *
"""


async def get_user_with_email(store: Store, email: str) -> Record | None:
    """Get a single user by email, ignoring letter case. None if absent."""
    try:
        rows = await store.fetch(_SELECT_BY_EMAIL, [email])
    except Exception:
        logger.exception("Error retrieving user by email")
        raise
    return first_or_none(rows)


async def get_user_with_id(store: Store, user_id: int) -> Record | None:
    """Get a single user by id. None if absent."""
    try:
        rows = await store.fetch(_SELECT_BY_ID, [user_id])
    except Exception:
        logger.exception("Error retrieving user %s", user_id)
        raise
    return first_or_none(rows)


async def add_user(store: Store, user: UserCreate | Mapping[str, Any]) -> Record:
    """Insert a user and return the stored row, including its new id.

    Args:
        store: An open store.
        user: ``UserCreate`` or a mapping with ``name``, ``email`` and ``password``.
    """
    if not isinstance(user, UserCreate):
        user = UserCreate.model_validate(user)

    try:
        rows = await store.execute(_INSERT, [user.name, user.email, user.password])
    except Exception:
        logger.exception("Error adding user")
        raise

    logger.info("User added: id=%s", rows[0]["id"])
    return rows[0]
