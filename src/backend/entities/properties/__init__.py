"""
Properties module.

Inserts into the ``properties`` table. Listing lives in ``property_search``.
"""

from .repository import PROPERTY_COLUMNS, add_property

__all__ = ["PROPERTY_COLUMNS", "add_property"]
