"""
Pydantic models for bookings.

A booking starts as ``pending`` and an administrator later moves it to
``confirmed``, ``cancelled`` or ``completed``.  The value is not
checked against that list.  ``userEmail`` links a booking to a user by
value only.
"""

from typing import Any, Optional

from pydantic import Field

from .common import DocumentRead


class BookingRead(DocumentRead):
    status: Optional[Any] = Field(None, example="pending")
