"""
User queries.

Lookups by email or id, and registration.
"""

import logging

from entities.shared.protocols import SqlExecutor
from models import NewUser, RowResult

logger = logging.getLogger(__name__)

_SELECT_BY_EMAIL = "SELECT * FROM users WHERE lower(users.email) = lower($1)"
_SELECT_BY_ID = "SELECT * FROM users WHERE users.id = $1"
_INSERT_USER = "INSERT INTO users (name, email, password) VALUES ($1, $2, $3) RETURNING *"


async def get_user_with_email(executor: SqlExecutor, email: str) -> RowResult:
    """
    Get a single user given their email.

    The comparison ignores case.

    Args:
        executor: Database handle.
        email: The email of the user.

    Returns:
        ``RowResult`` with the user row, ``not_found``, or ``error``.
    """
    result = await executor.execute(_SELECT_BY_EMAIL, [email])
    if not result.success:
        logger.error("User lookup by email failed: %s", result.error)
    return RowResult.from_query(result)


async def get_user_with_id(executor: SqlExecutor, user_id: int) -> RowResult:
    """
    Get a single user given their id.

    Args:
        executor: Database handle.
        user_id: The id of the user.

    Returns:
        ``RowResult`` with the user row, ``not_found``, or ``error``.
    """
    result = await executor.execute(_SELECT_BY_ID, [user_id])
    if not result.success:
        logger.error("User lookup by id %s failed: %s", user_id, result.error)
    return RowResult.from_query(result)


async def add_user(executor: SqlExecutor, user: NewUser) -> RowResult:
    """
    Add a new user.

    Args:
        executor: Database handle.
        user: Name, email and password of the new user.

    Returns:
        ``RowResult`` with the inserted row (including its id), or ``error``.
    """
    result = await executor.execute(_INSERT_USER, [user.name, user.email, user.password])
    if not result.success:
        logger.error("Adding user %s failed: %s", user.email, result.error)
    else:
        logger.info("Added user %s", user.email)
    return RowResult.from_query(result)
