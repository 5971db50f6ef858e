"""
Business logic for bookings.

New bookings are always ``pending``.  Updates are narrow: only
``status`` and ``adminNotes`` are written, whatever else the request
contains, so a client cannot rewrite who booked what.
"""

from typing import Any, Dict, List, Mapping, Optional

from pymongo.database import Database

from ..schemas.common import DeleteAck, InsertAck, UpdateAck
from .base import DocumentService


class BookingService(DocumentService):
    """Service for managing bookings."""

    collection_name = "bookings"
    defaults = {"status": "pending"}
    update_fields = ("status",)
    annotation_field = "adminNotes"

    @classmethod
    async def list_bookings(cls, db: Database) -> List[Dict[str, Any]]:
        return await cls.list_all(db)

    @classmethod
    async def list_bookings_for_user(cls, db: Database, email: str) -> List[Dict[str, Any]]:
        """Return the bookings whose ``userEmail`` equals ``email`` exactly."""
        return await cls.find_by(db, {"userEmail": email})

    @classmethod
    async def get_booking(cls, db: Database, booking_id: str) -> Optional[Dict[str, Any]]:
        return await cls.get(db, booking_id)

    @classmethod
    async def create_booking(cls, db: Database, payload: Mapping[str, Any]) -> InsertAck:
        return await cls.create(db, payload)

    @classmethod
    async def update_booking(cls, db: Database, booking_id: str, payload: Mapping[str, Any]) -> UpdateAck:
        return await cls.update(db, booking_id, payload)

    @classmethod
    async def delete_booking(cls, db: Database, booking_id: str) -> DeleteAck:
        return await cls.delete(db, booking_id)
