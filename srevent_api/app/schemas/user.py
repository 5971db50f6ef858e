"""
Pydantic models for user data.

Users are looked up by ``email`` as well as by id.  Uniqueness of the
email is a convention of the frontend and is not enforced here.
"""

from typing import Any, Optional

from pydantic import Field

from .common import DocumentRead


class UserRead(DocumentRead):
    """Schema for reading a user from the API."""

    role: Optional[Any] = Field(None, example="user")
