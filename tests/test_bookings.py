"""Tests for the booking routes (narrow updates, lookup by email)."""

from bson import ObjectId

from tests.conftest import parse_timestamp


def _create(client, payload):
    return client.post("/bookings", json=payload).json()["insertedId"]


def test_new_booking_is_pending(client):
    booking_id = _create(client, {"userEmail": "a@x.com", "eventId": "e1", "status": "confirmed"})
    booking = client.get(f"/bookings/{booking_id}").json()
    assert booking["status"] == "pending"
    assert booking["userEmail"] == "a@x.com"
    assert booking["createdAt"] == booking["updatedAt"]


def test_list_by_user_email(client):
    _create(client, {"userEmail": "a@x.com", "eventId": "e1"})
    _create(client, {"userEmail": "b@x.com", "eventId": "e1"})

    assert len(client.get("/bookings").json()) == 2

    mine = client.get("/bookings/user/a@x.com").json()
    assert len(mine) == 1
    assert mine[0]["userEmail"] == "a@x.com"

    assert client.get("/bookings/user/nobody@x.com").json() == []


def test_narrow_update_ignores_other_fields(client):
    booking_id = _create(client, {"userEmail": "a@x.com", "eventId": "e1", "seats": 2})
    before = client.get(f"/bookings/{booking_id}").json()

    ack = client.patch(
        f"/bookings/{booking_id}",
        json={"status": "confirmed", "adminNotes": "Paid", "userEmail": "evil@x.com", "seats": 99},
    ).json()
    assert ack["matchedCount"] == 1

    after = client.get(f"/bookings/{booking_id}").json()
    assert after["status"] == "confirmed"
    assert after["adminNotes"] == "Paid"
    assert after["userEmail"] == "a@x.com"
    assert after["seats"] == 2
    assert after["eventId"] == "e1"
    assert after["createdAt"] == before["createdAt"]
    assert parse_timestamp(after["updatedAt"]) >= parse_timestamp(before["updatedAt"])


def test_missing_admin_notes_become_empty_string(client):
    booking_id = _create(client, {"userEmail": "a@x.com"})
    client.patch(f"/bookings/{booking_id}", json={"status": "cancelled"})
    booking = client.get(f"/bookings/{booking_id}").json()
    assert booking["status"] == "cancelled"
    assert booking["adminNotes"] == ""


def test_status_is_not_validated(client):
    booking_id = _create(client, {"userEmail": "a@x.com"})
    client.patch(f"/bookings/{booking_id}", json={"status": "on-hold"})
    assert client.get(f"/bookings/{booking_id}").json()["status"] == "on-hold"


def test_missing_status_is_stored_as_null(client):
    booking_id = _create(client, {"userEmail": "a@x.com"})
    client.patch(f"/bookings/{booking_id}", json={"adminNotes": "note"})
    booking = client.get(f"/bookings/{booking_id}").json()
    assert booking["status"] is None
    assert booking["adminNotes"] == "note"


def test_delete_booking(client):
    booking_id = _create(client, {"userEmail": "a@x.com"})
    assert client.delete(f"/bookings/{booking_id}").json()["deletedCount"] == 1
    assert client.get(f"/bookings/{booking_id}").json() is None
    assert client.delete(f"/bookings/{booking_id}").json()["deletedCount"] == 0


def test_unknown_booking_update_matches_nothing(client):
    ack = client.patch(f"/bookings/{ObjectId()}", json={"status": "confirmed"}).json()
    assert ack["matchedCount"] == 0


def test_malformed_booking_id(client):
    assert client.patch("/bookings/123", json={"status": "confirmed"}).status_code == 400
    assert client.delete("/bookings/123").status_code == 400


def test_non_string_status_is_listed(client):
    booking_id = _create(client, {"userEmail": "a@x.com"})
    _create(client, {"userEmail": "b@x.com"})
    assert client.patch(f"/bookings/{booking_id}", json={"status": 1}).json()["matchedCount"] == 1

    response = client.get("/bookings")
    assert response.status_code == 200
    statuses = sorted(str(booking["status"]) for booking in response.json())
    assert statuses == ["1", "pending"]
    assert client.get(f"/bookings/{booking_id}").json()["status"] == 1
    assert client.get("/bookings/user/a@x.com").json()[0]["status"] == 1
