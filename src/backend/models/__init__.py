"""
Shared models for entities.

These models are used by the repositories, the search query builder,
and the API routers.
"""

from .results import QueryResult, RowResult, RowsResult
from .schema import NewProperty, NewUser
from .search import PropertySearchCriteria

__all__ = [
    # Inserts
    "NewUser",
    "NewProperty",
    # Search
    "PropertySearchCriteria",
    # Execution results
    "QueryResult",
    "RowResult",
    "RowsResult",
]
