"""
Users module.

Queries against the ``users`` table.
"""

from .repository import add_user, get_user_with_email, get_user_with_id

__all__ = ["add_user", "get_user_with_email", "get_user_with_id"]
