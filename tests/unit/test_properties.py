"""Unit tests for get_all_properties() and add_property().

The search query text itself is covered in test_property_search_query;
these tests check that the built query reaches the executor intact and
that results are mapped without losing the error outcome.
"""

from __future__ import annotations

from entities.properties import PROPERTY_COLUMNS, add_property
from entities.property_search import build_property_search_query, get_all_properties
from models import NewProperty, PropertySearchCriteria


def _make_property(**overrides: object) -> NewProperty:
    """Build a complete NewProperty for testing.

    Args:
        **overrides: Field values replacing the defaults.

    Returns:
        A fresh NewProperty instance.
    """
    fields: dict[str, object] = {
        "title": "Blank corner",
        "description": "description",
        "number_of_bedrooms": 6,
        "number_of_bathrooms": 6,
        "parking_spaces": 7,
        "cost_per_night": 85234,
        "thumbnail_photo_url": "https://images.example.com/thumb.jpg",
        "cover_photo_url": "https://images.example.com/cover.jpg",
        "street": "651 Nami Road",
        "country": "Canada",
        "city": "Bohbatev",
        "province": "Alberta",
        "post_code": "83680",
        "owner_id": 5,
    }
    fields.update(overrides)
    return NewProperty(**fields)


# ── Search ────────────────────────────────────────────────────────────


class TestGetAllProperties:
    """Search execution."""

    async def test_executes_built_query(self, property_executor) -> None:
        criteria = PropertySearchCriteria(city="boston", minimum_price_per_night=100)
        await get_all_properties(property_executor, criteria, limit=3)

        expected = build_property_search_query(criteria, 3)
        assert property_executor.last_query == expected.query_text
        assert property_executor.last_params == ["%boston%", 10000, 3]

    async def test_no_criteria_binds_default_limit(self, fake_sql_executor) -> None:
        await get_all_properties(fake_sql_executor)

        assert fake_sql_executor.last_params == [10]

    async def test_rows_passed_through(self, property_executor) -> None:
        result = await get_all_properties(property_executor)

        assert result.status == "success"
        assert result.rows == property_executor.rows

    async def test_no_matches_is_empty_success(self, fake_sql_executor) -> None:
        result = await get_all_properties(fake_sql_executor, PropertySearchCriteria(city="nowhere"))

        assert result.status == "success"
        assert result.rows == []

    async def test_db_error_is_distinguishable(self, failing_sql_executor) -> None:
        result = await get_all_properties(failing_sql_executor)

        assert result.status == "error"
        assert result.error == "connection refused"


# ── Insert ────────────────────────────────────────────────────────────


class TestAddProperty:
    """Property insert with the fixed column list."""

    def test_column_list(self) -> None:
        assert len(PROPERTY_COLUMNS) == 14
        assert PROPERTY_COLUMNS[0] == "title"
        assert PROPERTY_COLUMNS[-1] == "owner_id"

    async def test_query_shape(self, property_executor) -> None:
        await add_property(property_executor, _make_property())

        query = property_executor.last_query
        assert query.startswith(f"INSERT INTO properties ({', '.join(PROPERTY_COLUMNS)})")
        assert "VALUES ($1, $2, $3, $4, $5, $6, $7, $8, $9, $10, $11, $12, $13, $14)" in query
        assert query.rstrip().endswith("RETURNING *")

    async def test_binds_values_in_column_order(self, property_executor) -> None:
        prop = _make_property()
        await add_property(property_executor, prop)

        params = property_executor.last_params
        assert params is not None
        assert params == [getattr(prop, column) for column in PROPERTY_COLUMNS]
        assert params[0] == "Blank corner"
        assert params[5] == 85234
        assert params[13] == 5

    async def test_payload_key_order_does_not_matter(self, property_executor) -> None:
        payload = _make_property().model_dump()
        reversed_payload = dict(reversed(list(payload.items())))
        await add_property(property_executor, NewProperty(**reversed_payload))

        assert property_executor.last_params == list(payload.values())

    async def test_returns_inserted_row(self, property_executor) -> None:
        result = await add_property(property_executor, _make_property())

        assert result.status == "success"
        assert result.row == property_executor.rows[0]

    async def test_db_error(self, failing_sql_executor) -> None:
        result = await add_property(failing_sql_executor, _make_property())

        assert result.status == "error"
        assert result.row is None
