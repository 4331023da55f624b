"""
User API routes.
"""

from typing import Any

from api.dependencies import get_sql_executor, unwrap_row
from entities.shared.protocols import SqlExecutor
from entities.users import add_user, get_user_with_email, get_user_with_id
from fastapi import APIRouter, Depends, Query
from models import NewUser

router = APIRouter(prefix="/users", tags=["users"])


@router.post("", status_code=201)
async def create_user(
    body: NewUser,
    db: SqlExecutor = Depends(get_sql_executor),
) -> dict[str, Any]:
    """
    Register a new user.
    """
    row = unwrap_row(await add_user(db, body), "User was not created")
    # Never echo the stored password back
    row.pop("password", None)
    return row


@router.get("")
async def find_user_by_email(
    email: str = Query(min_length=1),
    db: SqlExecutor = Depends(get_sql_executor),
) -> dict[str, Any]:
    """
    Look up a user by email.
    """
    row = unwrap_row(await get_user_with_email(db, email), "User not found")
    row.pop("password", None)
    return row


@router.get("/{user_id}")
async def get_user(
    user_id: int,
    db: SqlExecutor = Depends(get_sql_executor),
) -> dict[str, Any]:
    """
    Get a user by id.
    """
    row = unwrap_row(await get_user_with_id(db, user_id), "User not found")
    row.pop("password", None)
    return row
