"""Unit tests for the per‑collection update rules."""

from srevent_api.app.services.booking_service import BookingService
from srevent_api.app.services.event_service import EventService
from srevent_api.app.services.message_service import MessageService
from srevent_api.app.services.user_service import UserService


def test_defaults_override_payload():
    assert BookingService.build_document({"status": "confirmed"})["status"] == "pending"
    assert MessageService.build_document({"status": "replied"})["status"] == "unread"
    assert UserService.build_document({"role": "admin"})["role"] == "user"
    assert "status" not in EventService.build_document({"name": "Fair"})


def test_created_and_updated_share_an_instant():
    document = EventService.build_document({"name": "Fair"})
    assert document["createdAt"] == document["updatedAt"]
    assert document["createdAt"].tzinfo is not None


def test_full_merge_changes():
    changes = EventService.build_changes({"name": "County Fair", "_id": "x", "createdAt": "y"})
    assert set(changes) == {"name", "updatedAt"}


def test_narrow_changes():
    changes = BookingService.build_changes({"status": "confirmed", "userEmail": "x@x.com"})
    assert set(changes) == {"status", "adminNotes", "updatedAt"}
    assert changes["adminNotes"] == ""

    changes = MessageService.build_changes({"adminReply": "Thanks", "text": "edited"})
    assert changes["status"] is None
    assert changes["adminReply"] == "Thanks"
    assert "text" not in changes
