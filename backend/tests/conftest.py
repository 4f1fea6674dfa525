"""Shared test configuration and fixtures.

Unit tests run the accessors against ``FakeStore``, which records every
statement it receives and answers with canned rows (or a canned error).
Integration tests against PostgreSQL live in ``test_integration/``.
"""

from collections.abc import AsyncGenerator, Sequence
from typing import Any

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from lightbnb.api.deps import get_store
from lightbnb.main import app


class FakeStore:
    """Stands in for ``lightbnb.database.Store`` without a database."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, str, list[Any]]] = []
        self.rows: list[dict[str, Any]] = []
        self.error: Exception | None = None

    async def _run(self, kind: str, sql: str, params: Sequence[Any]) -> list[dict[str, Any]]:
        self.calls.append((kind, sql, list(params)))
        if self.error is not None:
            raise self.error
        return [dict(row) for row in self.rows]

    async def fetch(self, sql: str, params: Sequence[Any] = ()) -> list[dict[str, Any]]:
        return await self._run("fetch", sql, params)

    async def execute(self, sql: str, params: Sequence[Any] = ()) -> list[dict[str, Any]]:
        return await self._run("execute", sql, params)

    @property
    def last_sql(self) -> str:
        return self.calls[-1][1]

    @property
    def last_params(self) -> list[Any]:
        return self.calls[-1][2]


@pytest.fixture
def fake_store() -> FakeStore:
    return FakeStore()


@pytest_asyncio.fixture
async def client(fake_store: FakeStore) -> AsyncGenerator[AsyncClient, None]:
    """Provide an httpx AsyncClient wired to the fake store."""
    app.dependency_overrides[get_store] = lambda: fake_store

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
        yield ac

    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# Canned rows
# ---------------------------------------------------------------------------


@pytest.fixture
def user_row() -> dict[str, Any]:
    return {
        "id": 1,
        "name": "Devin Sanders",
        "email": "tristanjacobs@gmail.com",
        "password": "$2a$10$FB/BOAVhpuLvpOREQVmvmezD4ED/.JBIDRh70tGevYzYzQgFId2u.",
    }


@pytest.fixture
def property_input() -> dict[str, Any]:
    return {
        "owner_id": 1,
        "title": "Speed lamp",
        "description": "description",
        "thumbnail_photo_url": "https://images.pexels.com/photos/2086676/pexels-photo-2086676.jpeg?h=350",
        "cover_photo_url": "https://images.pexels.com/photos/2086676/pexels-photo-2086676.jpeg",
        "cost_per_night": 93061,
        "street": "536 Namsub Highway",
        "city": "Sotboske",
        "province": "Quebec",
        "post_code": "28142",
        "country": "Canada",
        "parking_spaces": 6,
        "number_of_bathrooms": 4,
        "number_of_bedrooms": 8,
    }


@pytest.fixture
def property_row(property_input: dict[str, Any]) -> dict[str, Any]:
    return {"id": 1, **property_input, "average_rating": 4.5}
