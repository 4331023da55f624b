"""
Result models for executed statements.

A failed query and a query that matched nothing are different outcomes and
stay different all the way up to the caller.
"""

from typing import Any, Literal

from pydantic import BaseModel, Field


class QueryResult(BaseModel):
    """Outcome of a single statement run by a ``SqlExecutor``."""

    success: bool
    columns: list[str] = Field(default_factory=list)
    rows: list[dict[str, Any]] = Field(default_factory=list)
    row_count: int = 0
    error: str | None = None

    @classmethod
    def failure(cls, error: str) -> "QueryResult":
        """Build a failed result carrying ``error``."""
        return cls(success=False, error=error)


class RowResult(BaseModel):
    """A single-row lookup or insert."""

    status: Literal["success", "not_found", "error"]
    row: dict[str, Any] | None = None
    error: str | None = None

    @classmethod
    def from_query(cls, result: QueryResult) -> "RowResult":
        """Take the first row of ``result``, or report why there is none."""
        if not result.success:
            return cls(status="error", error=result.error)
        if not result.rows:
            return cls(status="not_found")
        return cls(status="success", row=result.rows[0])


class RowsResult(BaseModel):
    """A multi-row listing. An empty ``rows`` with ``success`` means no matches."""

    status: Literal["success", "error"]
    rows: list[dict[str, Any]] = Field(default_factory=list)
    error: str | None = None

    @classmethod
    def from_query(cls, result: QueryResult) -> "RowsResult":
        """Pass the rows of ``result`` through unchanged."""
        if not result.success:
            return cls(status="error", error=result.error)
        return cls(status="success", rows=result.rows)
