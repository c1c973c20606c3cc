"""
Booking repository for the booked collection and its per-booker counters.
"""

from pymongo.errors import DuplicateKeyError
from pymongo.results import DeleteResult
from typing import Any, Optional
from gohome.repositories.base import BaseRepository, Document
import logging

logger = logging.getLogger(__name__)


class BookingRepository(BaseRepository):
    """
    Data access for bookings.

    Besides the bookings themselves, a counter document per booker
    (`{_id: bookerId, count: n}`) lets the cap be enforced by the store
    with a single conditional increment.
    """

    resource_name = "Booking"

    def __init__(self, collection: Any, counters: Any):
        super().__init__(collection)
        self.counters = counters

    async def count_for_booker(self, booker_id: Any) -> int:
        return await self.count({"bookerId": booker_id})

    async def reserve_slot(self, booker_id: Any, limit: int) -> bool:
        """
        Atomically take one booking slot for a booker.

        The counter document is created first with an equality-only upsert,
        which the store retries on a concurrent duplicate insert. The slot is
        then taken by a conditional increment that only matches while the
        counter is below `limit`.

        Returns:
            True if a slot was taken, False if the booker is at the limit
        """
        try:
            await self.counters.update_one(
                {"_id": booker_id},
                {"$setOnInsert": {"count": 0}},
                upsert=True
            )
        except DuplicateKeyError:
            # Another request created the counter first
            logger.debug(f"Booking counter for {booker_id} already created")

        result = await self.counters.update_one(
            {"_id": booker_id, "count": {"$lt": limit}},
            {"$inc": {"count": 1}}
        )
        if result.modified_count != 1:
            logger.debug(f"Booking counter for {booker_id} is at the limit of {limit}")
            return False
        return True

    async def release_slot(self, booker_id: Any) -> None:
        """Give back a slot taken by `reserve_slot`."""
        await self.counters.update_one(
            {"_id": booker_id, "count": {"$gt": 0}},
            {"$inc": {"count": -1}}
        )

    async def delete_by_bookmark(self, bookmark: str) -> Optional[Document]:
        """
        Delete one booking whose `bookmark` field equals the given value.

        Returns:
            The removed booking, or None when nothing matched
        """
        try:
            document = await self.collection.find_one_and_delete({"bookmark": bookmark})
        except Exception as e:
            logger.error(f"Failed to delete {self.resource_name} with bookmark {bookmark}: {e}")
            raise
        if document is not None and "bookerId" in document:
            await self.release_slot(document["bookerId"])
        return document

    async def delete_result_for_bookmark(self, bookmark: str) -> DeleteResult:
        """Delete by bookmark and report it the way a driver delete does."""
        document = await self.delete_by_bookmark(bookmark)
        return DeleteResult({"n": 0 if document is None else 1}, True)
