"""
Service layer for contact messages.

Messages arrive ``unread``.  An administrator marks them ``read`` or
``replied`` and may attach ``adminReply``; no other field of a message
can be changed after it is sent.
"""

from typing import Any, Dict, List, Mapping, Optional

from pymongo.database import Database

from ..schemas.common import DeleteAck, InsertAck, UpdateAck
from .base import DocumentService


class MessageService(DocumentService):
    """Service for managing contact messages."""

    collection_name = "messages"
    defaults = {"status": "unread"}
    update_fields = ("status",)
    annotation_field = "adminReply"

    @classmethod
    async def list_messages(cls, db: Database) -> List[Dict[str, Any]]:
        return await cls.list_all(db)

    @classmethod
    async def get_message(cls, db: Database, message_id: str) -> Optional[Dict[str, Any]]:
        return await cls.get(db, message_id)

    @classmethod
    async def create_message(cls, db: Database, payload: Mapping[str, Any]) -> InsertAck:
        return await cls.create(db, payload)

    @classmethod
    async def update_message(cls, db: Database, message_id: str, payload: Mapping[str, Any]) -> UpdateAck:
        return await cls.update(db, message_id, payload)

    @classmethod
    async def delete_message(cls, db: Database, message_id: str) -> DeleteAck:
        return await cls.delete(db, message_id)
