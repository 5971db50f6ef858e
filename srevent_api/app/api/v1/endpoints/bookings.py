"""
Booking endpoints for API v1.

Clients create bookings and list their own by email; administrators list
everything and move bookings between statuses with PATCH.
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, Path
from pymongo.database import Database

from srevent_api.app.core.db import get_database
from srevent_api.app.schemas.booking import BookingRead
from srevent_api.app.schemas.common import DeleteAck, InsertAck, UpdateAck
from srevent_api.app.services.booking_service import BookingService


router = APIRouter()


@router.get("", response_model=List[BookingRead])
async def list_bookings(db: Database = Depends(get_database)) -> List[Dict[str, Any]]:
    """Return every booking (admin view)."""
    return await BookingService.list_bookings(db)


@router.get("/user/{email}", response_model=List[BookingRead])
async def list_user_bookings(
    email: str = Path(..., description="Exact value of the booking's userEmail"),
    db: Database = Depends(get_database),
) -> List[Dict[str, Any]]:
    return await BookingService.list_bookings_for_user(db, email)


@router.get("/{booking_id}", response_model=Optional[BookingRead])
async def get_booking(booking_id: str, db: Database = Depends(get_database)) -> Optional[Dict[str, Any]]:
    return await BookingService.get_booking(db, booking_id)


@router.post("", response_model=InsertAck)
async def create_booking(
    booking: Dict[str, Any] = Body(..., example={"eventId": "6650c1f2a9b8e4d1c2f3a4b5", "userEmail": "a@x.com"}),
    db: Database = Depends(get_database),
) -> InsertAck:
    """Create a booking.  Its status is always ``pending``."""
    return await BookingService.create_booking(db, booking)


@router.patch("/{booking_id}", response_model=UpdateAck)
async def update_booking(
    booking_id: str,
    updates: Dict[str, Any] = Body(..., example={"status": "confirmed", "adminNotes": "Paid at the door"}),
    db: Database = Depends(get_database),
) -> UpdateAck:
    """Set ``status`` and ``adminNotes``.

    Other fields in the body are ignored.  A missing ``adminNotes``
    clears the note.
    """
    return await BookingService.update_booking(db, booking_id, updates)


@router.delete("/{booking_id}", response_model=DeleteAck)
async def delete_booking(booking_id: str, db: Database = Depends(get_database)) -> DeleteAck:
    return await BookingService.delete_booking(db, booking_id)
