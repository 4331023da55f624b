"""Pure-function query construction for the property search page.

This module is intentionally free of database dependencies so that it
can be unit-tested without mocking.
"""

from dataclasses import dataclass, field
from typing import Any

from models import PropertySearchCriteria

DEFAULT_LIMIT = 10

# Prices are stored in cents; criteria arrive in dollars
_CENTS_PER_UNIT = 100

# 1 = 1 lets every filter start with AND, first or not
_BASE_QUERY = (
    "SELECT properties.*, avg(property_reviews.rating) AS average_rating\n"
    "FROM properties\n"
    "LEFT JOIN property_reviews ON properties.id = property_reviews.property_id\n"
    "WHERE 1 = 1"
)
_GROUP_BY = "GROUP BY properties.id"
_ORDER_BY = "ORDER BY properties.cost_per_night"


@dataclass(frozen=True, slots=True)
class PropertySearchQuery:
    """A search query ready for execution.

    Attributes:
        query_text: SQL with ``$n`` placeholders numbered from 1.
        params: Ordered values matching the placeholders in *query_text*.
    """

    query_text: str
    params: list[Any] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class _Predicate:
    """One ``<expression> <operator> <placeholder>`` comparison."""

    expression: str
    operator: str
    value: Any


class _SearchQueryBuilder:
    """Collects WHERE and HAVING predicates, then numbers them in one pass."""

    def __init__(self) -> None:
        self._where: list[_Predicate] = []
        self._having: list[_Predicate] = []

    def where(self, expression: str, operator: str, value: Any) -> None:  # noqa: ANN401
        self._where.append(_Predicate(expression, operator, value))

    def having(self, expression: str, operator: str, value: Any) -> None:  # noqa: ANN401
        self._having.append(_Predicate(expression, operator, value))

    def build(self, limit: int) -> PropertySearchQuery:
        params: list[Any] = []

        def bind(value: Any) -> str:  # noqa: ANN401
            params.append(value)
            return f"${len(params)}"

        lines = [_BASE_QUERY]
        lines.extend(f"AND {p.expression} {p.operator} {bind(p.value)}" for p in self._where)
        lines.append(_GROUP_BY)
        if self._having:
            conditions = " AND ".join(
                f"{p.expression} {p.operator} {bind(p.value)}" for p in self._having
            )
            lines.append(f"HAVING {conditions}")
        lines.append(_ORDER_BY)
        lines.append(f"LIMIT {bind(limit)}")

        return PropertySearchQuery(query_text="\n".join(lines) + ";", params=params)


def to_cents(amount: int | float) -> int:
    """Convert a dollar amount to whole cents."""
    return int(round(amount * _CENTS_PER_UNIT))


def build_property_search_query(
    criteria: PropertySearchCriteria | None = None,
    limit: int = DEFAULT_LIMIT,
) -> PropertySearchQuery:
    """Build the filtered property search query.

    Filters are applied in a fixed order: city, minimum price, maximum
    price, owner. The rating filter compares the per-property average, so
    it goes in ``HAVING`` after the ``GROUP BY``. The limit is always the
    last bound parameter.

    Args:
        criteria: Populated filters; ``None`` or an empty criteria set
            returns every property up to ``limit``.
        limit: Maximum number of rows to return.

    Returns:
        A ``PropertySearchQuery`` with query text and ordered params.
    """
    criteria = criteria or PropertySearchCriteria()
    builder = _SearchQueryBuilder()

    if criteria.city is not None:
        builder.where("properties.city", "ILIKE", f"%{criteria.city}%")
    if criteria.minimum_price_per_night is not None:
        builder.where("properties.cost_per_night", ">", to_cents(criteria.minimum_price_per_night))
    if criteria.maximum_price_per_night is not None:
        builder.where("properties.cost_per_night", "<", to_cents(criteria.maximum_price_per_night))
    if criteria.owner_id is not None:
        builder.where("properties.owner_id", "=", criteria.owner_id)

    if criteria.minimum_rating is not None:
        builder.having("avg(property_reviews.rating)", ">", criteria.minimum_rating)

    return builder.build(limit)
