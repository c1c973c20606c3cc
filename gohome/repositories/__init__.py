"""
Repository layer for document store access.
"""

from gohome.repositories.base import BaseRepository, contains_filter
from gohome.repositories.booking import BookingRepository
from gohome.repositories.house import HouseRepository
from gohome.repositories.user import UserRepository

__all__ = [
    "BaseRepository",
    "BookingRepository",
    "HouseRepository",
    "UserRepository",
    "contains_filter"
]
