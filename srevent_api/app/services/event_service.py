"""
Business logic for events.

Events use full‑merge updates: every field of the PATCH body is written.
When ``settings.event_fields`` is configured only those fields survive
create and update (the legacy ``EventName``/``Genre``/``Price`` form).
"""

from typing import Any, Dict, List, Mapping, Optional, Sequence

from pymongo.database import Database

from ..core.config import settings
from ..schemas.common import DeleteAck, InsertAck, UpdateAck
from .base import DocumentService


class EventService(DocumentService):
    """Service for managing events."""

    collection_name = "events"

    @classmethod
    def carried_fields(cls) -> Optional[Sequence[str]]:
        return settings.event_fields or None

    @classmethod
    async def list_events(cls, db: Database) -> List[Dict[str, Any]]:
        return await cls.list_all(db)

    @classmethod
    async def get_event(cls, db: Database, event_id: str) -> Optional[Dict[str, Any]]:
        return await cls.get(db, event_id)

    @classmethod
    async def create_event(cls, db: Database, payload: Mapping[str, Any]) -> InsertAck:
        return await cls.create(db, payload)

    @classmethod
    async def update_event(cls, db: Database, event_id: str, payload: Mapping[str, Any]) -> UpdateAck:
        return await cls.update(db, event_id, payload)

    @classmethod
    async def delete_event(cls, db: Database, event_id: str) -> DeleteAck:
        return await cls.delete(db, event_id)
