"""
Reservations module.

Queries against the ``reservations`` table.
"""

from .repository import get_all_reservations

__all__ = ["get_all_reservations"]
