"""
User repository for the users collection.
"""

from typing import List, Optional
from gohome.repositories.base import BaseRepository, Document, contains_filter

# Password hashes never leave the service through read endpoints
PUBLIC_PROJECTION = {"password": 0}


class UserRepository(BaseRepository):
    """Data access for registered users."""

    resource_name = "User"

    async def get_by_email(self, email: str) -> Optional[Document]:
        """Full user document, password hash included, for credential checks."""
        return await self.find_one({"email": email})

    async def email_exists(self, email: str) -> bool:
        return await self.find_one({"email": email}, {"_id": 1}) is not None

    async def get_by_username(self, user_name: str) -> Optional[Document]:
        return await self.find_one({"userName": user_name}, PUBLIC_PROJECTION)

    async def list_users(self, name: Optional[str] = None) -> List[Document]:
        """
        List users, optionally filtered by a case-insensitive substring of name.

        Args:
            name: Substring to look for in the user's name

        Returns:
            Matching users without password hashes
        """
        query: Document = {}
        if name:
            query["name"] = contains_filter(name)
        return await self.find_many(query, PUBLIC_PROJECTION)
