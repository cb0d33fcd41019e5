"""
Unit tests for hotel endpoints.
"""
import pytest


def hotel_payload(**overrides):
    payload = {
        "name": "Hilton Paris",
        "description": "Luxury hotel near the Eiffel Tower",
        "star_rating": 5,
        "street": "18 Avenue de Suffren",
        "city": "Paris",
        "state": "Ile-de-France",
        "country": "France",
        "zip_code": "75015",
        "email": "reservations@hiltonparis.fr",
        "phone": "+33 1 44 38 56 00",
        "website": "https://www.hiltonparis.fr",
    }
    payload.update(overrides)
    return payload


class TestCreateHotel:
    """Tests for hotel creation endpoint."""

    def test_create_hotel_success(self, client):
        """Test creating a hotel returns its ID and location."""
        response = client.post("/hotels", json=hotel_payload())
        assert response.status_code == 201
        hotel_id = response.json()["id"]
        assert hotel_id > 0
        assert response.headers["location"] == f"/hotels/{hotel_id}"

    def test_created_hotel_is_active(self, client):
        """Test that a new hotel starts in the Active status."""
        hotel_id = client.post("/hotels", json=hotel_payload()).json()["id"]
        data = client.get(f"/hotels/{hotel_id}").json()
        assert data["status"] == "Active"
        assert data["star_rating"] == 5
        assert data["email"] == "reservations@hiltonparis.fr"
        assert "is_deleted" not in data

    def test_create_hotel_minimal_fields(self, client):
        """Test only name, rating, city and country are required."""
        response = client.post(
            "/hotels",
            json={"name": "Ibis Lyon", "star_rating": 2, "city": "Lyon", "country": "France"},
        )
        assert response.status_code == 201

    @pytest.mark.parametrize("name", ["", "   "])
    def test_create_hotel_blank_name(self, client, name):
        """Test that a blank name is rejected."""
        response = client.post("/hotels", json=hotel_payload(name=name))
        assert response.status_code == 400
        assert "name" in response.json()["errors"]

    def test_create_hotel_missing_city(self, client):
        """Test that the city is required."""
        payload = hotel_payload()
        del payload["city"]
        response = client.post("/hotels", json=payload)
        assert response.status_code == 400
        assert "city" in response.json()["errors"]

    def test_create_hotel_invalid_email(self, client):
        """Test that a malformed email is rejected."""
        response = client.post("/hotels", json=hotel_payload(email="not-an-email"))
        assert response.status_code == 400

    def test_create_hotel_empty_email_allowed(self, client):
        """Test that the email may be left empty."""
        response = client.post("/hotels", json=hotel_payload(email=""))
        assert response.status_code == 201

    @pytest.mark.parametrize("rating", [0, 6])
    def test_create_hotel_invalid_star_rating(self, client, rating):
        """Test that star ratings outside 1..5 are rejected."""
        response = client.post("/hotels", json=hotel_payload(star_rating=rating))
        assert response.status_code == 400

    def test_create_hotel_name_too_long(self, client):
        """Test the name length limit."""
        response = client.post("/hotels", json=hotel_payload(name="x" * 201))
        assert response.status_code == 400

    def test_nothing_persisted_on_failure(self, client):
        """Test that a rejected request leaves no hotel behind."""
        client.post("/hotels", json=hotel_payload(country=""))
        assert client.get("/hotels").json() == []


class TestGetHotels:
    """Tests for hotel read endpoints."""

    def test_list_hotels_empty(self, client):
        """Test listing when no hotels exist."""
        response = client.get("/hotels")
        assert response.status_code == 200
        assert response.json() == []

    def test_list_hotels(self, client, sample_hotels):
        """Test listing all hotels."""
        response = client.get("/hotels")
        assert response.status_code == 200
        assert [h["id"] for h in response.json()] == [h.id for h in sample_hotels]

    def test_get_hotel_by_id(self, client, sample_hotel):
        """Test retrieving a specific hotel."""
        response = client.get(f"/hotels/{sample_hotel.id}")
        assert response.status_code == 200
        data = response.json()
        assert data["id"] == sample_hotel.id
        assert data["name"] == "Hilton Paris"
        assert data["zip_code"] == "75015"
        assert data["website"] == "https://www.hiltonparis.fr"
        assert data["updated_at"] is not None

    def test_get_hotel_not_found(self, client):
        """Test retrieving a non-existent hotel."""
        response = client.get("/hotels/99999")
        assert response.status_code == 404
        data = response.json()
        assert data["detail"] == "Hotel with ID 99999 was not found."
        assert data["path"] == "/hotels/99999"

    def test_versioned_prefix(self, client, sample_hotel):
        """Test that the API is also served under /api/v1."""
        response = client.get(f"/api/v1/hotels/{sample_hotel.id}")
        assert response.status_code == 200
        assert response.json()["name"] == "Hilton Paris"

    def test_versioned_create_location(self, client):
        """Test the Location header follows the versioned prefix."""
        response = client.post("/api/v1/hotels", json=hotel_payload())
        assert response.status_code == 201
        assert response.headers["location"] == f"/api/v1/hotels/{response.json()['id']}"


class TestUpdateHotel:
    """Tests for the hotel update endpoint."""

    def update_payload(self, hotel_id, **overrides):
        payload = hotel_payload(
            id=hotel_id,
            name="Hilton Paris Opera",
            star_rating=4,
            status="UnderMaintenance",
            street="2 Rue Scribe",
            zip_code="75009",
        )
        payload.update(overrides)
        return payload

    def test_update_hotel_success(self, client, sample_hotel):
        """Test a full update is reflected on the next read."""
        response = client.put(
            f"/hotels/{sample_hotel.id}", json=self.update_payload(sample_hotel.id)
        )
        assert response.status_code == 204
        assert response.content == b""

        data = client.get(f"/hotels/{sample_hotel.id}").json()
        assert data["name"] == "Hilton Paris Opera"
        assert data["star_rating"] == 4
        assert data["status"] == "UnderMaintenance"
        assert data["street"] == "2 Rue Scribe"

    def test_update_hotel_id_mismatch(self, client, sample_hotel):
        """Test that the body ID must match the path ID."""
        response = client.put(
            f"/hotels/{sample_hotel.id}", json=self.update_payload(sample_hotel.id + 1)
        )
        assert response.status_code == 400
        assert response.json()["detail"] == "Hotel ID mismatch"
        assert client.get(f"/hotels/{sample_hotel.id}").json()["name"] == "Hilton Paris"

    def test_update_hotel_not_found(self, client):
        """Test updating a non-existent hotel."""
        response = client.put("/hotels/99999", json=self.update_payload(99999))
        assert response.status_code == 404

    def test_update_hotel_invalid_status(self, client, sample_hotel):
        """Test that an unknown status is rejected."""
        response = client.put(
            f"/hotels/{sample_hotel.id}",
            json=self.update_payload(sample_hotel.id, status="Closed"),
        )
        assert response.status_code == 400
        assert "status" in response.json()["errors"]

    def test_update_hotel_missing_status(self, client, sample_hotel):
        """Test that the status is required on update."""
        payload = self.update_payload(sample_hotel.id)
        del payload["status"]
        response = client.put(f"/hotels/{sample_hotel.id}", json=payload)
        assert response.status_code == 400

    def test_update_hotel_blank_country(self, client, sample_hotel):
        """Test that validation failures leave the hotel unchanged."""
        response = client.put(
            f"/hotels/{sample_hotel.id}",
            json=self.update_payload(sample_hotel.id, country=" "),
        )
        assert response.status_code == 400
        assert client.get(f"/hotels/{sample_hotel.id}").json()["country"] == "France"


class TestDeleteHotel:
    """Tests for the hotel delete endpoint."""

    def test_delete_hotel_success(self, client, sample_hotel):
        """Test deleting a hotel hides it from reads."""
        response = client.delete(f"/hotels/{sample_hotel.id}")
        assert response.status_code == 204

        assert client.get(f"/hotels/{sample_hotel.id}").status_code == 404
        assert client.get("/hotels").json() == []

    def test_delete_hotel_twice(self, client, sample_hotel):
        """Test a second delete reports not found."""
        client.delete(f"/hotels/{sample_hotel.id}")
        response = client.delete(f"/hotels/{sample_hotel.id}")
        assert response.status_code == 404

    def test_delete_hotel_not_found(self, client):
        """Test deleting a non-existent hotel."""
        response = client.delete("/hotels/99999")
        assert response.status_code == 404

    def test_update_after_delete(self, client, sample_hotel):
        """Test a deleted hotel can no longer be updated."""
        client.delete(f"/hotels/{sample_hotel.id}")
        payload = hotel_payload(id=sample_hotel.id, status="Active")
        response = client.put(f"/hotels/{sample_hotel.id}", json=payload)
        assert response.status_code == 404


class TestSearchHotels:
    """Tests for the hotel search endpoint."""

    def test_search_without_filters(self, client, sample_hotels):
        """Test the default page lists every hotel."""
        response = client.get("/hotels/search")
        assert response.status_code == 200
        data = response.json()
        assert data["total_count"] == 5
        assert data["page_number"] == 1
        assert data["page_size"] == 10
        assert len(data["items"]) == 5

    def test_search_by_city(self, client, sample_hotels):
        """Test case-insensitive city matching."""
        data = client.get("/hotels/search", params={"city": "PARIS"}).json()
        assert data["total_count"] == 3

    def test_search_combined_filters(self, client, sample_hotels):
        """Test combining rating and status filters."""
        data = client.get(
            "/hotels/search", params={"min_star_rating": 5, "status": "Active"}
        ).json()
        assert [h["name"] for h in data["items"]] == ["Hilton Paris"]

    def test_search_pagination(self, client, sample_hotels):
        """Test paging through results."""
        data = client.get("/hotels/search", params={"page_number": 2, "page_size": 2}).json()
        assert data["total_count"] == 5
        assert [h["id"] for h in data["items"]] == [sample_hotels[2].id, sample_hotels[3].id]

    def test_search_invalid_page_number(self, client, sample_hotels):
        """Test that page numbers start at 1."""
        response = client.get("/hotels/search", params={"page_number": 0})
        assert response.status_code == 400
        assert response.json()["detail"] == "page number must be at least 1"

    def test_search_page_size_capped(self, client, sample_hotels):
        """Test that oversized pages are capped."""
        data = client.get("/hotels/search", params={"page_size": 500}).json()
        assert data["page_size"] == 100
        assert len(data["items"]) == 5

    def test_search_invalid_status(self, client):
        """Test that an unknown status filter is rejected."""
        response = client.get("/hotels/search", params={"status": "Closed"})
        assert response.status_code == 400

    def test_search_invalid_star_rating(self, client):
        """Test that the rating filter must be 1..5."""
        response = client.get("/hotels/search", params={"min_star_rating": 9})
        assert response.status_code == 400

    def test_search_excludes_deleted(self, client, sample_hotels):
        """Test deleted hotels do not appear in search results."""
        client.delete(f"/hotels/{sample_hotels[0].id}")
        data = client.get("/hotels/search", params={"country": "France"}).json()
        assert data["total_count"] == 2
        assert sample_hotels[0].id not in [h["id"] for h in data["items"]]
