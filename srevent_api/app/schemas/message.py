"""Pydantic models for contact messages (``unread`` → ``read``/``replied``)."""

from typing import Any, Optional

from pydantic import Field

from .common import DocumentRead


class MessageRead(DocumentRead):
    status: Optional[Any] = Field(None, example="unread")
