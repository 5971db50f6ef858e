"""Tests for the user routes."""

from bson import ObjectId


def test_create_and_lookup_by_email(client):
    user_id = client.post("/users", json={"name": "Ann", "email": "ann@x.com", "role": "admin"}).json()["insertedId"]

    user = client.get("/users/ann@x.com").json()
    assert user["_id"] == user_id
    assert user["name"] == "Ann"
    assert user["role"] == "user"
    assert user["createdAt"] == user["updatedAt"]


def test_lookup_by_email_is_exact(client):
    client.post("/users", json={"email": "ann@x.com"})
    response = client.get("/users/ANN@x.com")
    assert response.status_code == 200
    assert response.json() is None


def test_email_lookup_has_no_identifier_check(client):
    assert client.get("/users/not-an-object-id").status_code == 200


def test_lookup_by_id(client):
    user_id = client.post("/users", json={"email": "ann@x.com"}).json()["insertedId"]
    assert client.get(f"/users/id/{user_id}").json()["email"] == "ann@x.com"
    assert client.get(f"/users/id/{ObjectId()}").json() is None
    assert client.get("/users/id/zzz").status_code == 400


def test_list_and_delete_users(client):
    first = client.post("/users", json={"email": "a@x.com"}).json()["insertedId"]
    client.post("/users", json={"email": "b@x.com"})
    assert len(client.get("/users").json()) == 2

    assert client.delete(f"/users/{first}").json()["deletedCount"] == 1
    emails = [user["email"] for user in client.get("/users").json()]
    assert emails == ["b@x.com"]


def test_duplicate_emails_are_accepted(client):
    client.post("/users", json={"email": "a@x.com"})
    client.post("/users", json={"email": "a@x.com"})
    assert len(client.get("/users").json()) == 2


def test_non_string_role_is_listed(client, db):
    db.users.insert_one({"email": "root@x.com", "role": ["user", "admin"]})
    response = client.get("/users")
    assert response.status_code == 200
    assert response.json()[0]["role"] == ["user", "admin"]
    assert client.get("/users/root@x.com").json()["role"] == ["user", "admin"]
