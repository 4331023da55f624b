"""
Entities package.

Each subdirectory holds the queries for one part of the data model:
- users/: lookups by email or id, registration
- reservations/: a guest's reservations with property details
- properties/: inserting new listings
- property_search/: the filtered property listing query and its builder
- shared/: the PostgreSQL client and the ``SqlExecutor`` protocol

Every query function takes a ``SqlExecutor`` as its first argument.
"""

from entities.properties import add_property
from entities.property_search import get_all_properties
from entities.reservations import get_all_reservations
from entities.users import add_user, get_user_with_email, get_user_with_id

__all__ = [
    "add_property",
    "add_user",
    "get_all_properties",
    "get_all_reservations",
    "get_user_with_email",
    "get_user_with_id",
]
