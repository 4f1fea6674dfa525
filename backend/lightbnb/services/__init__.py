"""Data-access functions. Each one runs exactly one statement against a store."""

from lightbnb.services.properties import add_property
from lightbnb.services.reservations import get_all_reservations
from lightbnb.services.search import build_property_search, get_all_properties
from lightbnb.services.users import add_user, get_user_with_email, get_user_with_id

__all__ = [
    "add_property",
    "add_user",
    "build_property_search",
    "get_all_properties",
    "get_all_reservations",
    "get_user_with_email",
    "get_user_with_id",
]
