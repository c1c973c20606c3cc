"""
Integration tests for the house listing endpoints.
"""

from bson import ObjectId
from fastapi import status
from fastapi.testclient import TestClient

from tests.conftest import FakeDatabase, HouseFactory


def _create(client: TestClient, **kwargs) -> str:
    response = client.post("/houses", json=HouseFactory.create_house_data(**kwargs))
    assert response.status_code == status.HTTP_200_OK
    return response.json()["insertedId"]


class TestHouseCreate:
    """Tests for POST /houses."""

    def test_create_house(self, client: TestClient, fake_db: FakeDatabase):
        """Submitted fields are stored with a server creation timestamp."""
        house_id = _create(client, house_name="Lake View")

        stored = fake_db.houses.documents[0]
        assert str(stored["_id"]) == house_id
        assert stored["houseName"] == "Lake View"
        assert stored["bedrooms"] == 2
        assert "createdAt" in stored

    def test_create_house_keeps_extra_fields(self, client: TestClient, fake_db: FakeDatabase):
        """Unknown listing fields are stored as submitted."""
        _create(client, ownerEmail="owner@example.com", amenities=["wifi", "parking"])

        stored = fake_db.houses.documents[0]
        assert stored["ownerEmail"] == "owner@example.com"
        assert stored["amenities"] == ["wifi", "parking"]

    def test_create_house_does_not_invent_fields(self, client: TestClient, fake_db: FakeDatabase):
        """Fields the client did not send are not added."""
        client.post("/houses", json={"houseName": "Minimal"})

        stored = fake_db.houses.documents[0]
        assert set(stored) == {"_id", "houseName", "createdAt"}

    def test_create_house_stores_values_as_submitted(self, client: TestClient, fake_db: FakeDatabase):
        """Numbers and booleans in text-like fields are stored without coercion."""
        response = client.post(
            "/houses", json={"houseName": "A", "phone": 5551234, "availability": True, "bedrooms": "two"}
        )

        assert response.status_code == status.HTTP_200_OK
        stored = fake_db.houses.documents[0]
        assert stored["phone"] == 5551234
        assert stored["availability"] is True
        assert stored["bedrooms"] == "two"


class TestHouseList:
    """Tests for GET /houses filtering."""

    def test_list_all(self, client: TestClient):
        _create(client, house_name="Lake View", city="Dhaka")
        _create(client, house_name="Hill Top", city="Sylhet")

        response = client.get("/houses")

        assert response.status_code == status.HTTP_200_OK
        assert len(response.json()) == 2

    def test_filter_by_name_case_insensitive_substring(self, client: TestClient):
        """houseName filter matches substrings regardless of case."""
        _create(client, house_name="Lake View", city="Dhaka")
        _create(client, house_name="Lakeside Cottage", city="Sylhet")
        _create(client, house_name="Hill Top", city="Dhaka")

        response = client.get("/houses", params={"houseName": "LAKE"})

        names = {house["houseName"] for house in response.json()}
        assert names == {"Lake View", "Lakeside Cottage"}

    def test_filter_by_city_case_insensitive_substring(self, client: TestClient):
        """city filter matches substrings regardless of case."""
        _create(client, house_name="Lake View", city="Dhaka")
        _create(client, house_name="Hill Top", city="Sylhet")

        response = client.get("/houses", params={"city": "hak"})

        assert [house["houseName"] for house in response.json()] == ["Lake View"]

    def test_filters_combine(self, client: TestClient):
        """Both filters must match when both are given."""
        _create(client, house_name="Lake View", city="Dhaka")
        _create(client, house_name="Lake View", city="Sylhet")
        _create(client, house_name="Hill Top", city="Dhaka")

        response = client.get("/houses", params={"houseName": "lake", "city": "dhaka"})

        houses = response.json()
        assert len(houses) == 1
        assert houses[0]["houseName"] == "Lake View"
        assert houses[0]["city"] == "Dhaka"

    def test_filter_no_match(self, client: TestClient):
        _create(client, house_name="Lake View", city="Dhaka")

        response = client.get("/houses", params={"city": "Chittagong"})

        assert response.json() == []


class TestHouseGetUpdateDelete:
    """Tests for single listing operations."""

    def test_get_house(self, client: TestClient):
        house_id = _create(client, house_name="Lake View")

        response = client.get(f"/houses/{house_id}")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["_id"] == house_id
        assert data["houseName"] == "Lake View"

    def test_get_house_not_found(self, client: TestClient):
        """A missing listing returns null."""
        response = client.get(f"/houses/{ObjectId()}")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() is None

    def test_get_house_invalid_identifier(self, client: TestClient):
        response = client.get("/houses/xyz")

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_update_existing_house(self, client: TestClient, fake_db: FakeDatabase):
        """An update overwrites the listing fields of an existing house."""
        house_id = _create(client, house_name="Lake View", rent=12000)
        update = HouseFactory.create_house_data(house_name="Lake View Renovated", rent=15000)

        response = client.put(f"/houses/{house_id}", json=update)

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {
            "acknowledged": True,
            "matchedCount": 1,
            "modifiedCount": 1,
            "upsertedCount": 0,
            "upsertedId": None,
        }
        stored = fake_db.houses.documents[0]
        assert stored["houseName"] == "Lake View Renovated"
        assert stored["rent"] == 15000
        assert "createdAt" in stored

    def test_update_sets_omitted_fields_to_null(self, client: TestClient, fake_db: FakeDatabase):
        """Known fields missing from the update body are cleared."""
        house_id = _create(client, house_name="Lake View", phone="+880170000")

        client.put(f"/houses/{house_id}", json={"houseName": "Lake View"})

        stored = fake_db.houses.documents[0]
        assert stored["houseName"] == "Lake View"
        assert stored["phone"] is None
        assert stored["city"] is None

    def test_update_stores_values_as_submitted(self, client: TestClient, fake_db: FakeDatabase):
        house_id = _create(client)

        response = client.put(
            f"/houses/{house_id}", json={"houseName": 7, "phone": 5551234, "availability": False}
        )

        assert response.status_code == status.HTTP_200_OK
        stored = fake_db.houses.documents[0]
        assert stored["houseName"] == 7
        assert stored["phone"] == 5551234
        assert stored["availability"] is False

    def test_update_missing_house_upserts(self, client: TestClient, fake_db: FakeDatabase):
        """Updating a nonexistent identifier creates the listing under that identifier."""
        house_id = str(ObjectId())

        response = client.put(
            f"/houses/{house_id}", json=HouseFactory.create_house_data(house_name="Brand New")
        )

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["matchedCount"] == 0
        assert data["upsertedCount"] == 1
        assert data["upsertedId"] == house_id

        fetched = client.get(f"/houses/{house_id}").json()
        assert fetched["houseName"] == "Brand New"
        assert len(fake_db.houses.documents) == 1

    def test_delete_house(self, client: TestClient, fake_db: FakeDatabase):
        house_id = _create(client)

        response = client.delete(f"/houses/{house_id}")

        assert response.json() == {"acknowledged": True, "deletedCount": 1}
        assert fake_db.houses.documents == []
        assert client.get(f"/houses/{house_id}").json() is None
