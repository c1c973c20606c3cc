"""
Conversion of BSON documents and driver results to JSON-ready dictionaries.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional
from bson import ObjectId
from bson.errors import InvalidId
from pymongo.results import DeleteResult, InsertOneResult, UpdateResult
from gohome.utils.exceptions import InvalidIdentifierError


def parse_object_id(value: str) -> ObjectId:
    """
    Parse a path identifier into an ObjectId.

    Raises:
        InvalidIdentifierError: If the value is not a 24 character hex string
    """
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        raise InvalidIdentifierError(value)


def to_jsonable(value: Any) -> Any:
    """Recursively convert ObjectIds and datetimes inside a value."""
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, dict):
        return {key: to_jsonable(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_jsonable(item) for item in value]
    return value


def serialize_document(document: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    if document is None:
        return None
    return to_jsonable(document)


def serialize_documents(documents: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    return [to_jsonable(document) for document in documents]


def insert_result_to_dict(result: InsertOneResult) -> Dict[str, Any]:
    return {
        "acknowledged": result.acknowledged,
        "insertedId": to_jsonable(result.inserted_id),
    }


def update_result_to_dict(result: UpdateResult) -> Dict[str, Any]:
    upserted_id = result.upserted_id
    return {
        "acknowledged": result.acknowledged,
        "matchedCount": result.matched_count,
        "modifiedCount": result.modified_count,
        "upsertedCount": 1 if upserted_id is not None else 0,
        "upsertedId": to_jsonable(upserted_id),
    }


def delete_result_to_dict(result: DeleteResult) -> Dict[str, Any]:
    return {
        "acknowledged": result.acknowledged,
        "deletedCount": result.deleted_count,
    }
