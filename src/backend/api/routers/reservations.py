"""
Reservation API routes.
"""

from typing import Any

from api.dependencies import get_sql_executor, unwrap_rows
from config.settings import get_settings
from entities.reservations import get_all_reservations
from entities.shared.protocols import SqlExecutor
from fastapi import APIRouter, Depends, Query

router = APIRouter(prefix="/api/users/{guest_id}/reservations", tags=["reservations"])


@router.get("")
async def list_reservations(
    guest_id: int,
    limit: int | None = Query(default=None, ge=1),
    db: SqlExecutor = Depends(get_sql_executor),
) -> dict[str, list[dict[str, Any]]]:
    """
    List a guest's reservations, earliest start date first.
    """
    if limit is None:
        limit = get_settings().default_result_limit
    rows = unwrap_rows(await get_all_reservations(db, guest_id, limit))
    return {"reservations": rows}
