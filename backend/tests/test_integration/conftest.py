"""PostgreSQL-backed fixtures.

Uses the same PG instance as the configured ``DATABASE_URL`` but the
``lightbnb_test`` database, which must exist before running these tests.
Tests are skipped when it cannot be reached. Tables are created on first use
and truncated after every test, since the accessors commit their inserts.
"""

from collections.abc import AsyncGenerator
from datetime import date, timedelta

import pytest
import pytest_asyncio
from sqlalchemy import text

import lightbnb.models  # noqa: F401  (registers tables on Base.metadata)
from lightbnb.config import Settings, settings
from lightbnb.database import Base, Store

_test_db_url = settings.async_database_url.rsplit("/", 1)[0] + "/lightbnb_test"


@pytest_asyncio.fixture
async def store() -> AsyncGenerator[Store, None]:
    """Yield an open store on the test database with an empty schema."""
    db = Store(Settings(database_url=_test_db_url, db_pool_size=2, db_max_overflow=0))
    await db.open()
    try:
        async with db.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
    except Exception as e:
        await db.close()
        pytest.skip(f"test database unavailable: {e}")

    yield db

    async with db.engine.begin() as conn:
        await conn.execute(
            text("TRUNCATE property_reviews, reservations, properties, users RESTART IDENTITY CASCADE")
        )
    await db.close()


@pytest_asyncio.fixture
async def seeded(store: Store) -> dict:
    """Insert an owner, a guest, two reviewed properties and two reservations."""
    owner = (
        await store.execute(
            "INSERT INTO users (name, email, password) VALUES ($1, $2, $3) RETURNING *",
            ["Owner", "Owner@Example.com", "pw"],
        )
    )[0]
    guest = (
        await store.execute(
            "INSERT INTO users (name, email, password) VALUES ($1, $2, $3) RETURNING *",
            ["Guest", "guest@example.com", "pw"],
        )
    )[0]

    properties = []
    for title, city, cost in (("Cheap loft", "Vancouver", 5000), ("Pricey villa", "Victoria", 30000)):
        rows = await store.execute(
            "INSERT INTO properties (owner_id, title, description, thumbnail_photo_url, cover_photo_url, "
            "cost_per_night, street, city, province, post_code, country, parking_spaces, "
            "number_of_bathrooms, number_of_bedrooms) "
            "VALUES ($1, $2, 'd', 't', 'c', $3, 's', $4, 'BC', 'V5K', 'Canada', 1, 1, 1) RETURNING *",
            [owner["id"], title, cost, city],
        )
        properties.append(rows[0])

    reservations = []
    for prop, start in zip(properties, (date(2019, 6, 1), date(2018, 9, 11))):
        rows = await store.execute(
            "INSERT INTO reservations (start_date, end_date, property_id, guest_id) "
            "VALUES ($1, $2, $3, $4) RETURNING *",
            [start, start + timedelta(days=3), prop["id"], guest["id"]],
        )
        reservations.append(rows[0])

    for prop, reservation, rating in zip(properties, reservations, (3, 5)):
        await store.execute(
            "INSERT INTO property_reviews (guest_id, property_id, reservation_id, rating) "
            "VALUES ($1, $2, $3, $4)",
            [guest["id"], prop["id"], reservation["id"], rating],
        )

    return {"owner": owner, "guest": guest, "properties": properties, "reservations": reservations}
