"""Shared test fixtures for the LightBnB data layer."""

import sys
from pathlib import Path
from typing import Any

import pytest

# Ensure src/backend/ is on the path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src" / "backend"))

from config.settings import Settings
from models import QueryResult

# ---------------------------------------------------------------------------
# Protocol fakes
# ---------------------------------------------------------------------------


class FakeSqlExecutor:
    """In-memory fake satisfying the ``SqlExecutor`` protocol.

    Returns canned rows or an error, and records every call.
    """

    def __init__(
        self,
        rows: list[dict[str, Any]] | None = None,
        error: str | None = None,
    ) -> None:
        self.rows: list[dict[str, Any]] = rows or []
        self.error: str | None = error
        self.calls: list[tuple[str, list[Any] | None]] = []

    async def execute(
        self,
        query: str,
        params: list[Any] | None = None,
    ) -> QueryResult:
        """Return a success/failure ``QueryResult``."""
        self.calls.append((query, params))

        if self.error:
            return QueryResult.failure(self.error)

        columns = list(self.rows[0].keys()) if self.rows else []
        return QueryResult(
            success=True,
            columns=columns,
            rows=[dict(row) for row in self.rows],
            row_count=len(self.rows),
        )

    @property
    def last_query(self) -> str:
        """SQL text of the most recent call."""
        return self.calls[-1][0]

    @property
    def last_params(self) -> list[Any] | None:
        """Bound parameters of the most recent call."""
        return self.calls[-1][1]


# ---------------------------------------------------------------------------
# Sample rows
# ---------------------------------------------------------------------------

USER_ROW: dict[str, Any] = {
    "id": 1,
    "name": "Devin Sanders",
    "email": "tristanjacobs@gmail.com",
    "password": "$2a$10$FB/BOAVhpuLvpOREQVmvmezD4ED/.JBIDRh70tGevYzYzQgFId2u.",
}

PROPERTY_ROW: dict[str, Any] = {
    "id": 7,
    "owner_id": 1,
    "title": "Speed lamp",
    "cost_per_night": 93061,
    "city": "Boston",
    "average_rating": 4.2,
}


# ---------------------------------------------------------------------------
# Pytest fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def test_settings() -> Settings:
    """Return a ``Settings`` instance populated with safe test defaults."""
    return Settings(
        database_host="db.test",
        database_port=6543,
        database_user="tester",
        database_password="secret",
        database_name="lightbnb_test",
    )


@pytest.fixture
def fake_sql_executor() -> FakeSqlExecutor:
    """Return an empty ``FakeSqlExecutor`` instance."""
    return FakeSqlExecutor()


@pytest.fixture
def failing_sql_executor() -> FakeSqlExecutor:
    """Return a ``FakeSqlExecutor`` whose every query fails."""
    return FakeSqlExecutor(error="connection refused")


@pytest.fixture
def user_executor() -> FakeSqlExecutor:
    """Return a ``FakeSqlExecutor`` that answers with one user row."""
    return FakeSqlExecutor(rows=[USER_ROW])


@pytest.fixture
def property_executor() -> FakeSqlExecutor:
    """Return a ``FakeSqlExecutor`` that answers with one property row."""
    return FakeSqlExecutor(rows=[PROPERTY_ROW])


@pytest.fixture
def make_sql_executor() -> type[FakeSqlExecutor]:
    """Return the ``FakeSqlExecutor`` class for tests that need custom rows."""
    return FakeSqlExecutor
