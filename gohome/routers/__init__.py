"""
API route handlers for the go-home API.
"""

from .bookings import router as bookings_router
from .houses import router as houses_router
from .users import router as users_router

__all__ = ["bookings_router", "houses_router", "users_router"]
