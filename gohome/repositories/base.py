"""
Base repository class with common document operations using async pymongo.
Provides generic collection operations that can be extended by specific repositories.
"""

from bson import ObjectId
from pymongo.results import DeleteResult, InsertOneResult, UpdateResult
from typing import Any, Dict, List, Optional
import logging
import re

logger = logging.getLogger(__name__)

Document = Dict[str, Any]


def contains_filter(value: str) -> Dict[str, str]:
    """
    Build a case-insensitive substring match for a field.
    The value is matched literally, regex metacharacters are escaped.
    """
    return {"$regex": re.escape(value), "$options": "i"}


class BaseRepository:
    """
    Base repository class providing common collection operations.
    Every query against the document store goes through a repository.
    """

    resource_name = "Document"

    def __init__(self, collection: Any):
        """
        Initialize repository with the collection it operates on.

        Args:
            collection: Async pymongo collection (or compatible double)
        """
        self.collection = collection

    async def insert(self, document: Document) -> InsertOneResult:
        """
        Insert a new document.

        Args:
            document: Field values for the new document

        Returns:
            Driver insert result carrying the generated identifier
        """
        try:
            result = await self.collection.insert_one(document)
            logger.debug(f"Created {self.resource_name} with id: {result.inserted_id}")
            return result
        except Exception as e:
            logger.error(f"Failed to create {self.resource_name}: {e}")
            raise

    async def find_one(
        self,
        query: Document,
        projection: Optional[Document] = None
    ) -> Optional[Document]:
        try:
            return await self.collection.find_one(query, projection)
        except Exception as e:
            logger.error(f"Failed to get {self.resource_name} matching {query}: {e}")
            raise

    async def get_by_id(
        self,
        id: ObjectId,
        projection: Optional[Document] = None
    ) -> Optional[Document]:
        """
        Get a document by its identifier.

        Returns:
            The document if found, None otherwise
        """
        document = await self.find_one({"_id": id}, projection)
        if document is None:
            logger.debug(f"{self.resource_name} with id {id} not found")
        return document

    async def find_many(
        self,
        query: Optional[Document] = None,
        projection: Optional[Document] = None
    ) -> List[Document]:
        """
        Get all documents matching a query.

        Args:
            query: Filter document, everything when omitted
            projection: Optional field projection

        Returns:
            List of matching documents in natural order
        """
        try:
            cursor = self.collection.find(query or {}, projection)
            documents = await cursor.to_list(None)
            logger.debug(f"Retrieved {len(documents)} {self.resource_name} records")
            return documents
        except Exception as e:
            logger.error(f"Failed to get multiple {self.resource_name} records: {e}")
            raise

    async def count(self, query: Document) -> int:
        try:
            return await self.collection.count_documents(query)
        except Exception as e:
            logger.error(f"Failed to count {self.resource_name} records: {e}")
            raise

    async def update_by_id(
        self,
        id: ObjectId,
        update: Document,
        upsert: bool = False
    ) -> UpdateResult:
        """
        Apply an update document to the document with the given identifier.

        Args:
            id: Target identifier
            update: Update operators, e.g. {"$set": {...}}
            upsert: Create the document when nothing matches

        Returns:
            Driver update result
        """
        try:
            result = await self.collection.update_one({"_id": id}, update, upsert=upsert)
            if result.upserted_id is not None:
                logger.debug(f"Upserted {self.resource_name} with id: {id}")
            else:
                logger.debug(f"Updated {self.resource_name} with id: {id}")
            return result
        except Exception as e:
            logger.error(f"Failed to update {self.resource_name} {id}: {e}")
            raise

    async def delete_one(self, query: Document) -> DeleteResult:
        try:
            result = await self.collection.delete_one(query)
            logger.debug(f"Deleted {result.deleted_count} {self.resource_name} matching {query}")
            return result
        except Exception as e:
            logger.error(f"Failed to delete {self.resource_name}: {e}")
            raise

    async def delete_by_id(self, id: ObjectId) -> DeleteResult:
        return await self.delete_one({"_id": id})
