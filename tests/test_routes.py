"""Tests for the passport API routes."""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from cafechronicles.models.cafe_db.cafe_crud import create_cafe
from cafechronicles.services import stamps


def claim_payload(user, cafe, lat=1.30045, lng=103.80045, **extra):
    return {"user_id": user.id, "cafe_id": cafe.id, "lat": lat, "lng": lng, **extra}


def test_root(client: TestClient) -> None:
    response = client.get("/")
    assert response.status_code == 200
    assert response.json() == {"status": "Server is running"}


def test_health_endpoint(client: TestClient) -> None:
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_claim_scenario(client: TestClient, user, cafe) -> None:
    """Near claim succeeds, repeat is a duplicate, a claim 1.5km out is too far."""
    response = client.post("/api/locations/stamps/claim", json=claim_payload(user, cafe))
    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert data["stamp_count"] == 1
    assert data["cafe_name"] == "Kopi Corner"
    assert data["verification_method"] == "haversine"

    response = client.post("/api/locations/stamps/claim", json=claim_payload(user, cafe))
    assert response.status_code == 409
    detail = response.json()["detail"]
    assert detail["code"] == "ALREADY_CLAIMED_TODAY"
    assert detail["first_claimed"] == "2026-10-19T09:30:00"

    response = client.post("/api/locations/stamps/claim", json=claim_payload(user, cafe, lat=1.3100, lng=103.8100))
    assert response.status_code == 400
    detail = response.json()["detail"]
    assert detail["distance"] == pytest.approx(1572, abs=5)
    assert detail["threshold"] == 100
    assert detail["verification_method"] == "haversine"
    assert "Too far" in detail["message"]

    history = client.get(f"/api/locations/users/{user.id}/stamps").json()
    assert len(history) == 1


def test_claim_next_day(client: TestClient, user, cafe, clock) -> None:
    client.post("/api/locations/stamps/claim", json=claim_payload(user, cafe))
    clock.advance(days=1)

    response = client.post("/api/locations/stamps/claim", json=claim_payload(user, cafe))
    assert response.status_code == 200
    assert response.json()["stamp_count"] == 2


def test_claim_unknown_cafe(client: TestClient, user) -> None:
    response = client.post(
        "/api/locations/stamps/claim",
        json={"user_id": user.id, "cafe_id": 42, "lat": 1.3, "lng": 103.8},
    )
    assert response.status_code == 404
    assert response.json()["detail"] == "Cafe not found"


def test_claim_cafe_without_location(client: TestClient, session, user) -> None:
    cafe = create_cafe(session, "Pop-up Cart", "Orchard Road")
    response = client.post("/api/locations/stamps/claim", json=claim_payload(user, cafe))
    assert response.status_code == 404


@pytest.mark.parametrize(
    "payload",
    [
        {"cafe_id": 1, "lat": 1.3, "lng": 103.8},
        {"user_id": 1, "cafe_id": 1, "lat": 91, "lng": 103.8},
        {"user_id": 1, "cafe_id": 1, "lat": 1.3, "lng": -181},
        {"user_id": 1, "cafe_id": 1, "lat": "nan", "lng": 103.8},
        {"user_id": "abc", "cafe_id": 1, "lat": 1.3, "lng": 103.8},
    ],
)
def test_claim_rejects_invalid_payload(client: TestClient, payload) -> None:
    response = client.post("/api/locations/stamps/claim", json=payload)
    assert response.status_code == 422


def test_claim_store_unavailable(client: TestClient, user, cafe, monkeypatch: pytest.MonkeyPatch) -> None:
    def broken(*args, **kwargs):
        raise OperationalError("SELECT", {}, Exception("Too many connections"))

    monkeypatch.setattr(stamps, "get_user_by_id", broken)

    response = client.post("/api/locations/stamps/claim", json=claim_payload(user, cafe))
    assert response.status_code == 503


def test_user_stamps_empty(client: TestClient, user) -> None:
    response = client.get(f"/api/locations/users/{user.id}/stamps")
    assert response.status_code == 200
    assert response.json() == []


def test_user_stamps_newest_first(client: TestClient, session, user, cafe, clock) -> None:
    second = create_cafe(session, "Brew Lab", "8 Club Street", lat=1.3002, lng=103.8001)
    third = create_cafe(session, "Nylon", "4 Everton Park", lat=1.2999, lng=103.8003)

    for target in (cafe, second, third):
        assert client.post("/api/locations/stamps/claim", json=claim_payload(user, target)).status_code == 200
        clock.advance(minutes=15)

    response = client.get(f"/api/locations/users/{user.id}/stamps")
    assert response.status_code == 200
    data = response.json()
    assert [s["cafe_name"] for s in data] == ["Nylon", "Brew Lab", "Kopi Corner"]
    assert data[0]["cafe_address"] == "4 Everton Park"
    assert data[0]["cafe_id"] == third.id
    assert data[2]["created_at"] == "2026-10-19T09:30:00"


def test_user_stamps_invalid_id(client: TestClient) -> None:
    response = client.get("/api/locations/users/abc/stamps")
    assert response.status_code == 422


def test_user_stamps_store_unavailable(client: TestClient, user, monkeypatch: pytest.MonkeyPatch) -> None:
    def broken(*args, **kwargs):
        raise OperationalError("SELECT", {}, Exception("gone"))

    monkeypatch.setattr(stamps, "list_stamps_for_user", broken)

    response = client.get(f"/api/locations/users/{user.id}/stamps")
    assert response.status_code == 503


def test_list_cafes(client: TestClient, cafe) -> None:
    response = client.get("/api/locations/cafes")
    assert response.status_code == 200
    assert response.json() == [
        {"id": cafe.id, "name": "Kopi Corner", "address": "1 Orchard Road", "lat": 1.3, "lng": 103.8}
    ]


def test_nearby_cafes(client: TestClient, session, cafe) -> None:
    create_cafe(session, "Far Away", "Changi", lat=1.3644, lng=103.9915)

    response = client.post("/api/locations/cafes/nearby", json={"lat": 1.30045, "lng": 103.80045})
    assert response.status_code == 200
    data = response.json()
    assert [c["name"] for c in data] == ["Kopi Corner"]
    assert data[0]["distance"] < 100


def test_nearby_cafes_rejects_bad_radius(client: TestClient) -> None:
    response = client.post("/api/locations/cafes/nearby", json={"lat": 1.3, "lng": 103.8, "radius": 0})
    assert response.status_code == 422
