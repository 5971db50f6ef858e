"""Failure handling: malformed identifiers and an unreachable store."""

from unittest.mock import patch

import pytest
from bson import ObjectId
from bson.errors import InvalidDocument
from mongomock.collection import Collection
from pymongo.errors import DuplicateKeyError, OperationFailure, ServerSelectionTimeoutError, WriteError

from srevent_api.app.core.db import parse_object_id
from srevent_api.app.core.errors import MalformedIdentifier


class TestMalformedIdentifier:

    @pytest.mark.parametrize("value", ["", "123", "zzzzzzzzzzzzzzzzzzzzzzzz", "6650c1f2a9b8e4d1c2f3a4b5aa"])
    def test_parse_rejects(self, value):
        with pytest.raises(MalformedIdentifier):
            parse_object_id(value)

    def test_parse_accepts_hex(self):
        object_id = ObjectId()
        assert parse_object_id(str(object_id)) == object_id

    def test_rejected_before_store_call(self, client):
        with patch.object(Collection, "find_one") as find_one, \
                patch.object(Collection, "update_one") as update_one, \
                patch.object(Collection, "delete_one") as delete_one:
            assert client.get("/events/bad").status_code == 400
            assert client.patch("/bookings/bad", json={"status": "x"}).status_code == 400
            assert client.delete("/messages/bad").status_code == 400
        find_one.assert_not_called()
        update_one.assert_not_called()
        delete_one.assert_not_called()


class TestStoreUnavailable:

    def test_list_reports_server_error(self, client):
        with patch.object(Collection, "find", side_effect=ServerSelectionTimeoutError("no servers")):
            response = client.get("/events")
        assert response.status_code == 503
        assert response.json() == {"detail": "Document store unavailable"}

    def test_create_reports_server_error(self, client):
        with patch.object(Collection, "insert_one", side_effect=OperationFailure("auth failed")):
            response = client.post("/users", json={"email": "a@x.com"})
        assert response.status_code == 503

    def test_not_retried(self, client):
        with patch.object(Collection, "find_one", side_effect=ServerSelectionTimeoutError("down")) as find_one:
            response = client.get(f"/events/{ObjectId()}")
        assert response.status_code == 503
        assert find_one.call_count == 1

    def test_health_reports_unavailable(self, client, db):
        with patch.object(type(db), "list_collection_names", side_effect=ServerSelectionTimeoutError("down")):
            body = client.get("/health").json()
        assert body["status"] == "ok"
        assert body["store"] == "unavailable"


class TestRejectedDocument:

    def test_duplicate_key_is_a_client_error(self, client):
        with patch.object(Collection, "insert_one", side_effect=DuplicateKeyError("E11000 duplicate key")):
            response = client.post("/users", json={"email": "a@x.com"})
        assert response.status_code == 400
        assert response.json()["detail"].startswith("Document rejected by the store:")

    def test_write_error_on_update_is_a_client_error(self, client):
        event_id = client.post("/events", json={"name": "Fair"}).json()["insertedId"]
        with patch.object(Collection, "update_one", side_effect=WriteError("field names cannot start with $")):
            response = client.patch(f"/events/{event_id}", json={"$x": 1})
        assert response.status_code == 400
        assert "cannot start with $" in response.json()["detail"]

    def test_invalid_document_is_a_client_error(self, client):
        with patch.object(Collection, "insert_one", side_effect=InvalidDocument("document too large")):
            response = client.post("/messages", json={"text": "Hi"})
        assert response.status_code == 400

    def test_auth_failure_stays_a_server_error(self, client):
        with patch.object(Collection, "insert_one", side_effect=OperationFailure("bad auth")):
            response = client.post("/messages", json={"text": "Hi"})
        assert response.status_code == 503
