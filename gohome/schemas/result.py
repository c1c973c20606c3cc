"""
Response schemas mirroring document store write results.
"""

from pydantic import BaseModel
from typing import Optional


class InsertResult(BaseModel):
    acknowledged: bool
    insertedId: str


class UpdateResult(BaseModel):
    acknowledged: bool
    matchedCount: int
    modifiedCount: int
    upsertedCount: int
    upsertedId: Optional[str] = None


class DeleteResult(BaseModel):
    acknowledged: bool
    deletedCount: int
