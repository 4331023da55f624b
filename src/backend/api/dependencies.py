"""
FastAPI dependencies for shared resources and result mapping.
"""

import logging
from typing import Any

from entities.shared.protocols import SqlExecutor
from fastapi import HTTPException, Request
from models import RowResult, RowsResult

logger = logging.getLogger(__name__)


def get_sql_executor(request: Request) -> SqlExecutor:
    """
    Get the database client from app state.

    Raises HTTPException 503 if the pool was never created.
    """
    db = getattr(request.app.state, "db", None)
    if db is None:
        raise HTTPException(status_code=503, detail="Database not initialized")
    return db


def unwrap_row(result: RowResult, not_found_detail: str) -> dict[str, Any]:
    """
    Return the row of a ``RowResult`` or raise the matching HTTP error.

    Raises HTTPException 404 when nothing matched and 500 when the query failed.
    """
    if result.status == "error":
        logger.error("Query failed, returning 500: %s", result.error)
        raise HTTPException(status_code=500, detail=result.error or "Database error")
    if result.status == "not_found" or result.row is None:
        raise HTTPException(status_code=404, detail=not_found_detail)
    return result.row


def unwrap_rows(result: RowsResult) -> list[dict[str, Any]]:
    """Return the rows of a ``RowsResult``; raises HTTPException 500 on failure."""
    if result.status == "error":
        logger.error("Query failed, returning 500: %s", result.error)
        raise HTTPException(status_code=500, detail=result.error or "Database error")
    return result.rows
