"""
House listing service.
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
from pymongo.results import DeleteResult, InsertOneResult, UpdateResult
from gohome.database import Database
from gohome.repositories.house import HouseRepository
from gohome.schemas.house import HouseCreate, HouseUpdate
from gohome.utils.serialization import parse_object_id
import logging

logger = logging.getLogger(__name__)


class HouseService:
    """Business logic for house listings."""

    def __init__(self, database: Database):
        self.db = database
        self.house_repo = HouseRepository(database.houses)

    async def create_house(self, house_data: HouseCreate) -> InsertOneResult:
        """Store the submitted listing with a server creation timestamp."""
        document = house_data.to_document()
        document["createdAt"] = datetime.now(timezone.utc)
        result = await self.house_repo.insert(document)
        logger.info(f"House created: {result.inserted_id}")
        return result

    async def list_houses(
        self,
        house_name: Optional[str] = None,
        city: Optional[str] = None
    ) -> List[Dict[str, Any]]:
        return await self.house_repo.list_houses(house_name=house_name, city=city)

    async def get_house(self, house_id: str) -> Optional[Dict[str, Any]]:
        return await self.house_repo.get_by_id(parse_object_id(house_id))

    async def update_house(self, house_id: str, house_data: HouseUpdate) -> UpdateResult:
        """
        Replace the known fields of a listing.

        A listing that does not exist yet is created under the given identifier
        instead of reporting not found.

        Args:
            house_id: Listing identifier from the path
            house_data: Replacement field values

        Returns:
            Driver update result, with upsertedId set when a listing was created
        """
        result = await self.house_repo.replace_fields(
            parse_object_id(house_id),
            house_data.to_set_fields()
        )
        if result.upserted_id is not None:
            logger.info(f"House {house_id} did not exist and was created")
        return result

    async def delete_house(self, house_id: str) -> DeleteResult:
        return await self.house_repo.delete_by_id(parse_object_id(house_id))
