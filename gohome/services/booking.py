"""
Booking service enforcing the per-booker booking cap.
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
from pymongo.results import DeleteResult, InsertOneResult
from gohome.config import settings
from gohome.database import Database
from gohome.repositories.booking import BookingRepository
from gohome.schemas.booking import BookingCreate
from gohome.utils.exceptions import BookingLimitExceededError
from gohome.utils.serialization import parse_object_id
import logging

logger = logging.getLogger(__name__)


class BookingService:
    """
    Business logic for room bookings.

    A booker may hold at most `booking_limit` bookings. The existing count is
    checked first; the slot is then taken with a conditional increment on the
    booker's counter so two concurrent requests cannot both pass the check.
    """

    def __init__(self, database: Database, booking_limit: Optional[int] = None):
        self.db = database
        self.booking_repo = BookingRepository(database.booked, database.booking_counters)
        self.booking_limit = booking_limit if booking_limit is not None else settings.booking_limit

    async def create_booking(self, booking_data: BookingCreate) -> InsertOneResult:
        """
        Create a booking if the booker is below the cap.

        Args:
            booking_data: Submitted booking fields

        Returns:
            Insert result for the new booking

        Raises:
            BookingLimitExceededError: If the booker already holds the maximum
        """
        booker_id = booking_data.bookerId

        existing = await self.booking_repo.count_for_booker(booker_id)
        if existing >= self.booking_limit:
            logger.warning(f"Booking rejected, {booker_id} already holds {existing} bookings")
            raise BookingLimitExceededError(self.booking_limit)

        if not await self.booking_repo.reserve_slot(booker_id, self.booking_limit):
            logger.warning(f"Booking rejected, {booker_id} reached the cap concurrently")
            raise BookingLimitExceededError(self.booking_limit)

        document = booking_data.to_document()
        document["bookedAt"] = datetime.now(timezone.utc)
        try:
            result = await self.booking_repo.insert(document)
        except Exception:
            try:
                await self.booking_repo.release_slot(booker_id)
            except Exception as release_error:
                logger.error(f"Failed to release booking slot for {booker_id}: {release_error}")
            raise

        logger.info(f"Booking {result.inserted_id} created for {booker_id}")
        return result

    async def list_bookings(self) -> List[Dict[str, Any]]:
        return await self.booking_repo.find_many()

    async def get_booking(self, booking_id: str) -> Optional[Dict[str, Any]]:
        return await self.booking_repo.get_by_id(parse_object_id(booking_id))

    async def delete_booking(self, bookmark: str) -> DeleteResult:
        """
        Delete the booking whose `bookmark` field equals the path value.
        Bookings created through the API carry no such field.
        """
        result = await self.booking_repo.delete_result_for_bookmark(bookmark)
        logger.info(f"Delete booking by bookmark {bookmark}: {result.deleted_count} removed")
        return result
