"""
House repository for the houses collection.
Handles listing filters and the upsert used for full replacement.
"""

from bson import ObjectId
from pymongo.results import UpdateResult
from typing import Any, Dict, List, Optional
from gohome.repositories.base import BaseRepository, Document, contains_filter


class HouseRepository(BaseRepository):
    """Data access for house listings."""

    resource_name = "House"

    async def list_houses(
        self,
        house_name: Optional[str] = None,
        city: Optional[str] = None
    ) -> List[Document]:
        """
        List houses with optional case-insensitive substring filters.
        Both filters apply together when both are given.

        Args:
            house_name: Substring of the listing name
            city: Substring of the city

        Returns:
            Matching house documents
        """
        query: Document = {}
        if house_name:
            query["houseName"] = contains_filter(house_name)
        if city:
            query["city"] = contains_filter(city)
        return await self.find_many(query)

    async def replace_fields(self, id: ObjectId, fields: Dict[str, Any]) -> UpdateResult:
        """Set every given field on the house, creating it under `id` if absent."""
        return await self.update_by_id(id, {"$set": fields}, upsert=True)
