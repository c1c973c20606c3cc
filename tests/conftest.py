"""
Test configuration and fixtures for the go-home API.
Provides an in-memory document store, service fixtures and test data factories.
"""

import os

os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("ACCESS_TOKEN_SECRET", "test-secret-key-for-go-home-tests")

import copy
import re
import uuid
from typing import Any, Dict, List, Optional

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient
from pymongo.errors import DuplicateKeyError
from pymongo.results import DeleteResult, InsertOneResult, UpdateResult

from gohome.database import get_database
from gohome.main import app
from gohome.services.auth import AuthService
from gohome.services.booking import BookingService
from gohome.services.house import HouseService


# In-memory document store
def _matches_condition(document: Dict[str, Any], field: str, condition: Any) -> bool:
    present = field in document
    value = document.get(field)

    if isinstance(condition, dict) and condition and all(key.startswith("$") for key in condition):
        for operator, operand in condition.items():
            if operator == "$regex":
                flags = re.IGNORECASE if "i" in condition.get("$options", "") else 0
                if not isinstance(value, str) or not re.search(operand, value, flags):
                    return False
            elif operator == "$options":
                continue
            elif operator == "$lt":
                if not present or value is None or not value < operand:
                    return False
            elif operator == "$gt":
                if not present or value is None or not value > operand:
                    return False
            else:
                raise NotImplementedError(f"Operator {operator} not supported by FakeCollection")
        return True

    return present and value == condition


def _matches(document: Dict[str, Any], query: Optional[Dict[str, Any]]) -> bool:
    return all(_matches_condition(document, field, condition) for field, condition in (query or {}).items())


def _project(document: Dict[str, Any], projection: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    document = copy.deepcopy(document)
    if not projection:
        return document
    excluded = [field for field, flag in projection.items() if not flag]
    included = [field for field, flag in projection.items() if flag]
    if included:
        return {field: document[field] for field in ["_id", *included] if field in document}
    for field in excluded:
        document.pop(field, None)
    return document


class FakeCursor:
    """Async cursor over a snapshot of matching documents."""

    def __init__(self, documents: List[Dict[str, Any]]):
        self.documents = documents

    async def to_list(self, length: Optional[int] = None) -> List[Dict[str, Any]]:
        return self.documents if length is None else self.documents[:length]


class FakeCollection:
    """
    In-memory stand-in for an async pymongo collection.
    Implements the operations and query operators the repositories use.
    """

    def __init__(self, name: str):
        self.name = name
        self.documents: List[Dict[str, Any]] = []

    def _find_index(self, query: Optional[Dict[str, Any]]) -> Optional[int]:
        for index, document in enumerate(self.documents):
            if _matches(document, query):
                return index
        return None

    def _check_unique_id(self, document_id: Any) -> None:
        if any(existing["_id"] == document_id for existing in self.documents):
            raise DuplicateKeyError(
                f"E11000 duplicate key error collection: {self.name} index: _id_ dup key: {document_id}",
                11000
            )

    async def insert_one(self, document: Dict[str, Any]) -> InsertOneResult:
        if "_id" not in document:
            document["_id"] = ObjectId()
        self._check_unique_id(document["_id"])
        self.documents.append(copy.deepcopy(document))
        return InsertOneResult(document["_id"], True)

    async def find_one(
        self,
        query: Optional[Dict[str, Any]] = None,
        projection: Optional[Dict[str, Any]] = None
    ) -> Optional[Dict[str, Any]]:
        index = self._find_index(query)
        return None if index is None else _project(self.documents[index], projection)

    def find(
        self,
        query: Optional[Dict[str, Any]] = None,
        projection: Optional[Dict[str, Any]] = None
    ) -> FakeCursor:
        return FakeCursor([
            _project(document, projection) for document in self.documents if _matches(document, query)
        ])

    async def count_documents(self, query: Dict[str, Any]) -> int:
        return sum(1 for document in self.documents if _matches(document, query))

    async def update_one(
        self,
        query: Dict[str, Any],
        update: Dict[str, Any],
        upsert: bool = False
    ) -> UpdateResult:
        index = self._find_index(query)

        if index is None:
            if not upsert:
                return UpdateResult({"n": 0, "nModified": 0}, True)
            document = {
                field: condition for field, condition in query.items()
                if not (isinstance(condition, dict) and any(key.startswith("$") for key in condition))
            }
            document.setdefault("_id", ObjectId())
            self._check_unique_id(document["_id"])
            self._apply_update(document, update, inserting=True)
            self.documents.append(document)
            return UpdateResult({"n": 1, "nModified": 0, "upserted": document["_id"]}, True)

        document = self.documents[index]
        before = copy.deepcopy(document)
        self._apply_update(document, update)
        return UpdateResult({"n": 1, "nModified": int(before != document)}, True)

    @staticmethod
    def _apply_update(document: Dict[str, Any], update: Dict[str, Any], inserting: bool = False) -> None:
        for operator, fields in update.items():
            if operator == "$setOnInsert":
                if inserting:
                    document.update(copy.deepcopy(fields))
            elif operator == "$set":
                document.update(copy.deepcopy(fields))
            elif operator == "$inc":
                for field, amount in fields.items():
                    document[field] = document.get(field, 0) + amount
            else:
                raise NotImplementedError(f"Update operator {operator} not supported by FakeCollection")

    async def delete_one(self, query: Dict[str, Any]) -> DeleteResult:
        index = self._find_index(query)
        if index is None:
            return DeleteResult({"n": 0}, True)
        del self.documents[index]
        return DeleteResult({"n": 1}, True)

    async def find_one_and_delete(self, query: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        index = self._find_index(query)
        if index is None:
            return None
        return self.documents.pop(index)


class FakeDatabase:
    """Database handle backed by FakeCollections."""

    def __init__(self):
        self.users = FakeCollection("users")
        self.houses = FakeCollection("houses")
        self.booked = FakeCollection("booked")
        self.booking_counters = FakeCollection("booking_counters")
        self.reachable = True

    async def ping(self) -> bool:
        return self.reachable

    async def close(self) -> None:
        pass


@pytest.fixture
def fake_db() -> FakeDatabase:
    """Fresh in-memory database for each test."""
    return FakeDatabase()


@pytest.fixture
def client(fake_db: FakeDatabase) -> TestClient:
    """Create a test client with the database handle overridden."""
    app.dependency_overrides[get_database] = lambda: fake_db
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()


# Service fixtures
@pytest.fixture
def auth_service(fake_db: FakeDatabase) -> AuthService:
    return AuthService(fake_db)


@pytest.fixture
def house_service(fake_db: FakeDatabase) -> HouseService:
    return HouseService(fake_db)


@pytest.fixture
def booking_service(fake_db: FakeDatabase) -> BookingService:
    return BookingService(fake_db)


# Test data factories
class UserFactory:
    """Factory for creating test users."""

    @staticmethod
    def create_user_data(
        email: str = None,
        password: str = "testpassword123",
        name: str = "Test User",
        user_name: str = None,
        role: str = "renter"
    ) -> dict:
        suffix = uuid.uuid4().hex[:8]
        return {
            "name": name,
            "userName": user_name or f"user{suffix}",
            "image": f"https://example.com/avatars/{suffix}.png",
            "role": role,
            "email": email or f"test{suffix}@example.com",
            "password": password,
        }


class HouseFactory:
    """Factory for creating test house listings."""

    @staticmethod
    def create_house_data(
        house_name: str = "Sunny Loft",
        city: str = "Dhaka",
        **overrides
    ) -> dict:
        data = {
            "houseName": house_name,
            "address": "12 Lake Road",
            "city": city,
            "bedrooms": 2,
            "bathrooms": 1,
            "roomSize": 850,
            "availability": "2024-07-01",
            "rent": 12000,
            "phone": "+8801700000000",
            "description": "Bright flat near the lake",
        }
        data.update(overrides)
        return data


class BookingFactory:
    """Factory for creating test bookings."""

    @staticmethod
    def create_booking_data(booker_id: str = "booker-1", **overrides) -> dict:
        data = {
            "bookerId": booker_id,
            "houseId": str(ObjectId()),
            "houseName": "Sunny Loft",
            "bookerEmail": "renter@example.com",
        }
        data.update(overrides)
        return data
