"""Protocol interfaces for I/O boundaries.

These protocols enable dependency injection for testability.
The production implementation wraps an asyncpg pool; test fakes
return canned data with zero network access.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from models import QueryResult


@runtime_checkable
class SqlExecutor(Protocol):
    """Executes parameterised SQL against the database.

    Placeholders are PostgreSQL positional markers (``$1``, ``$2``, ...).
    """

    async def execute(
        self,
        query: str,
        params: list[Any] | None = None,
    ) -> QueryResult:
        """Execute a SQL statement.

        Args:
            query: SQL statement, optionally with ``$n`` placeholders.
            params: Bind-parameter values in placeholder order (or ``None``).

        Returns:
            A ``QueryResult``; failures are reported, not raised.
        """
        ...
