"""
API routers package.
"""

from api.routers.properties import router as properties_router
from api.routers.reservations import router as reservations_router
from api.routers.users import router as users_router

__all__ = ["properties_router", "reservations_router", "users_router"]
