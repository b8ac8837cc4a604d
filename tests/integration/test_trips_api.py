"""Integration tests for trip endpoints."""

import uuid
from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from backend.app.db.inmemory import InMemoryStore
from backend.app.mail.client import get_mail_client
from backend.app.main import app
from tests.factories import FailingMailClient, RecordingMailClient, make_trip


def _future(days: float) -> datetime:
    return datetime.now(timezone.utc) + timedelta(days=days)


def _create_payload(**overrides: object) -> dict[str, object]:
    payload: dict[str, object] = {
        "destination": "Lisbon",
        "starts_at": _future(7).isoformat(),
        "ends_at": _future(10).isoformat(),
        "owner_name": "Ana",
        "owner_email": "ana@example.com",
        "emails_to_invite": ["bruno@example.com", "carla@example.com"],
    }
    payload.update(overrides)
    return payload


@pytest.mark.integration
def test_create_trip(client: TestClient, store: InMemoryStore, mail_client: RecordingMailClient) -> None:
    """Test that a trip is created with owner and invitees and the owner is mailed."""
    response = client.post("/trips", json=_create_payload())

    assert response.status_code == 201
    trip_id = uuid.UUID(response.json()["trip_id"])

    trip = store.trips[trip_id]
    assert trip.destination == "Lisbon"
    assert trip.is_confirmed is False

    participants = [p for p in store.participants.values() if p.trip_id == trip_id]
    owner = next(p for p in participants if p.is_owner)
    assert owner.email == "ana@example.com"
    assert owner.name == "Ana"
    assert owner.is_confirmed is True
    assert sorted(p.email for p in participants if not p.is_owner) == [
        "bruno@example.com",
        "carla@example.com",
    ]

    assert len(mail_client.outbox) == 1
    message = mail_client.outbox[0]
    assert message.to_address == "ana@example.com"
    assert f"/trips/{trip_id}/confirm" in message.html


@pytest.mark.integration
def test_create_trip_start_in_past(client: TestClient, store: InMemoryStore) -> None:
    """Test that a trip starting yesterday is rejected and nothing is stored."""
    response = client.post(
        "/trips",
        json=_create_payload(starts_at=_future(-1).isoformat(), ends_at=_future(7).isoformat()),
    )

    assert response.status_code == 400
    assert response.json() == {"message": "Invalid trip start date", "code": "INVALID_START_DATE"}
    assert store.trips == {}


@pytest.mark.integration
def test_create_trip_end_before_start(client: TestClient) -> None:
    """Test that a reversed window is rejected."""
    response = client.post(
        "/trips",
        json=_create_payload(starts_at=_future(5).isoformat(), ends_at=_future(4).isoformat()),
    )

    assert response.status_code == 400
    assert response.json()["code"] == "INVALID_END_DATE"


@pytest.mark.integration
def test_create_trip_invalid_body(client: TestClient) -> None:
    """Test request validation for short destinations and bad e-mails."""
    assert client.post("/trips", json=_create_payload(destination="Ab")).status_code == 422
    assert client.post("/trips", json=_create_payload(owner_email="nope")).status_code == 422


@pytest.mark.integration
def test_create_trip_mail_failure_still_succeeds(client: TestClient, store: InMemoryStore) -> None:
    """Test that a mail outage does not fail trip creation."""
    app.dependency_overrides[get_mail_client] = lambda: FailingMailClient()

    response = client.post("/trips", json=_create_payload())

    assert response.status_code == 201
    assert len(store.trips) == 1


@pytest.mark.integration
def test_get_trip(client: TestClient, store: InMemoryStore) -> None:
    """Test fetching a trip and a missing trip."""
    trip = make_trip(store, _future(1), _future(3))

    response = client.get(f"/trips/{trip.id}")

    assert response.status_code == 200
    body = response.json()["trip"]
    assert body["id"] == str(trip.id)
    assert body["destination"] == "Lisbon"

    missing = client.get(f"/trips/{uuid.uuid4()}")
    assert missing.status_code == 404
    assert missing.json() == {"message": "Trip not found", "code": "TRIP_NOT_FOUND"}


@pytest.mark.integration
def test_update_trip(client: TestClient, store: InMemoryStore) -> None:
    """Test replacing destination and window."""
    trip = make_trip(store, _future(1), _future(3))
    starts_at = _future(20)
    ends_at = _future(25)

    response = client.put(
        f"/trips/{trip.id}",
        json={
            "destination": "Porto",
            "starts_at": starts_at.isoformat(),
            "ends_at": ends_at.isoformat(),
        },
    )

    assert response.status_code == 200
    assert response.json() == {"trip_id": str(trip.id)}

    updated = store.trips[trip.id]
    assert updated.destination == "Porto"
    assert updated.starts_at == starts_at
    assert updated.ends_at == ends_at


@pytest.mark.integration
def test_update_trip_invalid_window(client: TestClient, store: InMemoryStore) -> None:
    """Test that update applies the same window checks as create."""
    trip = make_trip(store, _future(1), _future(3))

    response = client.put(
        f"/trips/{trip.id}",
        json={
            "destination": "Porto",
            "starts_at": _future(5).isoformat(),
            "ends_at": _future(2).isoformat(),
        },
    )

    assert response.status_code == 400
    assert response.json()["code"] == "INVALID_END_DATE"
    assert store.trips[trip.id].destination == "Lisbon"


@pytest.mark.integration
def test_update_missing_trip(client: TestClient) -> None:
    """Test that updating an unknown trip is a 404."""
    response = client.put(
        f"/trips/{uuid.uuid4()}",
        json={
            "destination": "Porto",
            "starts_at": _future(1).isoformat(),
            "ends_at": _future(2).isoformat(),
        },
    )

    assert response.status_code == 404


@pytest.mark.integration
def test_confirm_trip_invites_participants(
    client: TestClient, store: InMemoryStore, mail_client: RecordingMailClient
) -> None:
    """Test owner confirmation: redirect, confirmed flag, one invitation per guest."""
    created = client.post("/trips", json=_create_payload())
    trip_id = created.json()["trip_id"]
    mail_client.outbox.clear()

    response = client.get(f"/trips/{trip_id}/confirm", follow_redirects=False)

    assert response.status_code == 302
    assert response.headers["location"] == f"http://localhost:3000/trips/{trip_id}"
    assert store.trips[uuid.UUID(trip_id)].is_confirmed is True
    assert sorted(m.to_address for m in mail_client.outbox) == [
        "bruno@example.com",
        "carla@example.com",
    ]
    assert all("/participants/" in m.html for m in mail_client.outbox)

    # Confirming again only redirects
    again = client.get(f"/trips/{trip_id}/confirm", follow_redirects=False)
    assert again.status_code == 302
    assert len(mail_client.outbox) == 2


@pytest.mark.integration
def test_confirm_missing_trip(client: TestClient) -> None:
    """Test that confirming an unknown trip is a 404."""
    response = client.get(f"/trips/{uuid.uuid4()}/confirm", follow_redirects=False)
    assert response.status_code == 404
