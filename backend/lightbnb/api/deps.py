"""Shared API dependencies — single import point for all routers.

The store is created and opened by the application lifespan and kept on
``app.state``; routers receive it through ``get_store``::

    from lightbnb.api.deps import get_store
"""

from fastapi import Request

from lightbnb.database import Store


def get_store(request: Request) -> Store:
    """Return the application's store for FastAPI dependency injection."""
    return request.app.state.store


__all__ = ["get_store"]
