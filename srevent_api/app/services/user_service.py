"""
Service layer for users.

Every user is created with role ``user``; promoting someone to
``admin`` happens outside this API.  Lookups by email are exact
matches and return the first document found.
"""

from typing import Any, Dict, List, Mapping, Optional

from pymongo.database import Database

from ..schemas.common import DeleteAck, InsertAck
from .base import DocumentService


class UserService(DocumentService):
    """Service for managing users."""

    collection_name = "users"
    defaults = {"role": "user"}

    @classmethod
    async def list_users(cls, db: Database) -> List[Dict[str, Any]]:
        return await cls.list_all(db)

    @classmethod
    async def get_user(cls, db: Database, user_id: str) -> Optional[Dict[str, Any]]:
        return await cls.get(db, user_id)

    @classmethod
    async def get_user_by_email(cls, db: Database, email: str) -> Optional[Dict[str, Any]]:
        return await cls.find_one_by(db, {"email": email})

    @classmethod
    async def create_user(cls, db: Database, payload: Mapping[str, Any]) -> InsertAck:
        return await cls.create(db, payload)

    @classmethod
    async def delete_user(cls, db: Database, user_id: str) -> DeleteAck:
        return await cls.delete(db, user_id)
