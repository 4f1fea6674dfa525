"""Filtered property search — SQL assembly and execution.

Filters are collected as ``(clause, parameters)`` pairs instead of being
concatenated into the statement as they are applied. Rendering then places
row predicates under ``WHERE`` and aggregate predicates under ``HAVING``,
joins each group with ``AND`` and numbers the ``$n`` placeholders in the order
they appear in the final text, so the keyword and the parameter index never
depend on which filters happened to be supplied.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from lightbnb.config import settings
from lightbnb.database import Record, Store
from lightbnb.schemas.property import PropertyFilter

logger = logging.getLogger(__name__)

_SELECT = """
SELECT properties.*, AVG(property_reviews.rating) AS average_rating
FROM properties
JOIN property_reviews ON properties.id = property_reviews.property_id"""


@dataclass(frozen=True)
class Predicate:
    """A clause with one ``{}`` slot per bound parameter."""

    clause: str
    params: tuple[Any, ...] = ()


@dataclass
class PredicateList:
    """Row (WHERE) and aggregate (HAVING) predicates for one statement."""

    where: list[Predicate] = field(default_factory=list)
    having: list[Predicate] = field(default_factory=list)

    def add_where(self, clause: str, *params: Any) -> None:
        self.where.append(Predicate(clause, params))

    def add_having(self, clause: str, *params: Any) -> None:
        self.having.append(Predicate(clause, params))

    def __len__(self) -> int:
        return len(self.where) + len(self.having)


class _Numbering:
    """Hands out ``$1``, ``$2``, ... while collecting the bound values."""

    def __init__(self) -> None:
        self.params: list[Any] = []

    def bind(self, value: Any) -> str:
        self.params.append(value)
        return f"${len(self.params)}"

    def render(self, keyword: str, predicates: list[Predicate]) -> str | None:
        if not predicates:
            return None
        clauses = [p.clause.format(*(self.bind(v) for v in p.params)) for p in predicates]
        return f"{keyword} " + " AND ".join(clauses)


def property_predicates(filters: PropertyFilter) -> PredicateList:
    """Translate a filter object into predicates, in a fixed filter order."""
    predicates = PredicateList()

    # LIKE is case-sensitive in PostgreSQL; lookups by email use LOWER() instead.
    if filters.city:
        predicates.add_where("city LIKE {}", f"%{filters.city}%")

    if filters.owner_id:
        predicates.add_where("owner_id = {}", filters.owner_id)

    if filters.minimum_price_per_night and filters.maximum_price_per_night:
        predicates.add_where(
            "cost_per_night BETWEEN {} AND {}",
            filters.minimum_price_per_night,
            filters.maximum_price_per_night,
        )

    if filters.minimum_rating:
        predicates.add_having("AVG(property_reviews.rating) >= {}", filters.minimum_rating)

    return predicates


def build_property_search(
    filters: PropertyFilter | Mapping[str, Any] | None = None,
    limit: int | None = None,
) -> tuple[str, list[Any]]:
    """Build the search statement and its positional parameters.

    Args:
        filters: A ``PropertyFilter`` or a plain mapping with the same keys.
        limit: Maximum number of rows, always bound as the last parameter.
            Defaults to ``settings.default_result_limit``.

    Returns:
        ``(sql, params)`` ready for ``Store.fetch``.

    Raises:
        ValueError: If ``limit`` is not a positive integer.
        pydantic.ValidationError: If a mapping holds invalid filter values.
    """
    if limit is None:
        limit = settings.default_result_limit
    if limit < 1:
        raise ValueError(f"limit must be a positive integer, got {limit!r}")
    if filters is None:
        filters = PropertyFilter()
    elif not isinstance(filters, PropertyFilter):
        filters = PropertyFilter.model_validate(filters)

    predicates = property_predicates(filters)
    logger.debug("Property search with %d filter(s), limit %d", len(predicates), limit)
    numbering = _Numbering()

    lines = [_SELECT.strip()]
    where = numbering.render("WHERE", predicates.where)
    if where:
        lines.append(where)
    lines.append("GROUP BY properties.id")
    having = numbering.render("HAVING", predicates.having)
    if having:
        lines.append(having)
    lines.append("ORDER BY cost_per_night")
    lines.append(f"LIMIT {numbering.bind(limit)};")

    return "\n".join(lines), numbering.params


async def get_all_properties(
    store: Store,
    filters: PropertyFilter | Mapping[str, Any] | None = None,
    limit: int | None = None,
) -> list[Record]:
    """Return properties matching ``filters``, cheapest first, with ratings.

    Properties without any review are not returned (the rating join is an
    inner join).
    """
    sql, params = build_property_search(filters, limit)
    logger.debug("Property search query: %s", sql)
    logger.debug("Property search params: %s", params)

    try:
        return await store.fetch(sql, params)
    except Exception:
        logger.exception("Error retrieving properties")
        raise
