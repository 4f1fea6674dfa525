"""LightBnB — FastAPI application entry point."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from lightbnb.api.v1.properties import router as properties_router
from lightbnb.api.v1.reservations import router as reservations_router
from lightbnb.api.v1.users import router as users_router
from lightbnb.config import settings
from lightbnb.database import Store

# Configure root logger so all lightbnb.* loggers output to stderr.
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Open the store at startup and dispose its pool at shutdown."""
    store = Store(settings)
    await store.open()
    app.state.store = store
    try:
        yield
    finally:
        await store.close()


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="Data access for LightBnB users, properties and reservations.",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# Routers
app.include_router(users_router)
app.include_router(properties_router)
app.include_router(reservations_router)


@app.get("/health", tags=["health"])
async def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy", "service": settings.app_name}
