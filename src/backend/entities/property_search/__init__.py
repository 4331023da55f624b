"""
Property search module.

Builds and runs the filtered property listing query.
"""

from .builder import DEFAULT_LIMIT, PropertySearchQuery, build_property_search_query, to_cents
from .search import get_all_properties

__all__ = [
    "DEFAULT_LIMIT",
    "PropertySearchQuery",
    "build_property_search_query",
    "get_all_properties",
    "to_cents",
]
