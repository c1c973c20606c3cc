"""
Pydantic schemas for request and response validation.
"""

from .booking import BookingCreate
from .house import HouseCreate, HouseUpdate, HOUSE_FIELDS
from .result import InsertResult, UpdateResult, DeleteResult
from .user import UserCreate, LoginRequest, TokenResponse

__all__ = [
    "BookingCreate",
    "HouseCreate",
    "HouseUpdate",
    "HOUSE_FIELDS",
    "InsertResult",
    "UpdateResult",
    "DeleteResult",
    "UserCreate",
    "LoginRequest",
    "TokenResponse",
]
