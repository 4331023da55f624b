"""
Property API routes: the search listing and new listings.
"""

from typing import Annotated, Any

from api.dependencies import get_sql_executor, unwrap_row, unwrap_rows
from config.settings import get_settings
from entities.properties import add_property
from entities.property_search import get_all_properties
from entities.shared.protocols import SqlExecutor
from fastapi import APIRouter, Depends, Query
from models import NewProperty, PropertySearchCriteria

router = APIRouter(prefix="/api/properties", tags=["properties"])


@router.get("")
async def search_properties(
    criteria: Annotated[PropertySearchCriteria, Query()],
    limit: int | None = Query(default=None, ge=1),
    db: SqlExecutor = Depends(get_sql_executor),
) -> dict[str, list[dict[str, Any]]]:
    """
    List properties matching the search filters, cheapest first.
    """
    if limit is None:
        limit = get_settings().default_result_limit
    rows = unwrap_rows(await get_all_properties(db, criteria, limit))
    return {"properties": rows}


@router.post("", status_code=201)
async def create_property(
    body: NewProperty,
    db: SqlExecutor = Depends(get_sql_executor),
) -> dict[str, Any]:
    """
    Create a new property listing.
    """
    return unwrap_row(await add_property(db, body), "Property was not created")
