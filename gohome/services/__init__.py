"""
Service layer for business logic implementation.
Contains services for users, houses, bookings and error handling.
"""

from .auth import AuthService
from .booking import BookingService
from .error_handler import ErrorHandlerService
from .house import HouseService

__all__ = [
    "AuthService",
    "BookingService",
    "ErrorHandlerService",
    "HouseService"
]
