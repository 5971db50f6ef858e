"""
Message endpoints for API v1.

Visitors post contact messages; administrators read them, mark them and
reply through PATCH.
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends
from pymongo.database import Database

from srevent_api.app.core.db import get_database
from srevent_api.app.schemas.common import DeleteAck, InsertAck, UpdateAck
from srevent_api.app.schemas.message import MessageRead
from srevent_api.app.services.message_service import MessageService


router = APIRouter()


@router.get("", response_model=List[MessageRead])
async def list_messages(db: Database = Depends(get_database)) -> List[Dict[str, Any]]:
    return await MessageService.list_messages(db)


@router.get("/{message_id}", response_model=Optional[MessageRead])
async def get_message(message_id: str, db: Database = Depends(get_database)) -> Optional[Dict[str, Any]]:
    return await MessageService.get_message(db, message_id)


@router.post("", response_model=InsertAck)
async def create_message(
    message: Dict[str, Any] = Body(..., example={"name": "Ann", "email": "ann@x.com", "text": "Hello"}),
    db: Database = Depends(get_database),
) -> InsertAck:
    return await MessageService.create_message(db, message)


@router.patch("/{message_id}", response_model=UpdateAck)
async def update_message(
    message_id: str,
    updates: Dict[str, Any] = Body(..., example={"status": "replied", "adminReply": "Thanks!"}),
    db: Database = Depends(get_database),
) -> UpdateAck:
    """Set ``status`` and ``adminReply``; everything else is ignored."""
    return await MessageService.update_message(db, message_id, updates)


@router.delete("/{message_id}", response_model=DeleteAck)
async def delete_message(message_id: str, db: Database = Depends(get_database)) -> DeleteAck:
    return await MessageService.delete_message(db, message_id)
