"""
Event endpoints for API v1.

Plain CRUD over the ``events`` collection.  Bodies are free‑form JSON
objects; PATCH writes every field it receives.
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends
from pymongo.database import Database

from srevent_api.app.core.db import get_database
from srevent_api.app.schemas.common import DeleteAck, InsertAck, UpdateAck
from srevent_api.app.schemas.event import EventRead
from srevent_api.app.services.event_service import EventService


router = APIRouter()


@router.get("", response_model=List[EventRead])
async def list_events(db: Database = Depends(get_database)) -> List[Dict[str, Any]]:
    """Return all events, unfiltered and unpaginated."""
    return await EventService.list_events(db)


@router.get("/{event_id}", response_model=Optional[EventRead])
async def get_event(event_id: str, db: Database = Depends(get_database)) -> Optional[Dict[str, Any]]:
    """Retrieve a single event by its id.

    Responds ``null`` when no event has that id and 400 when the id is
    not a valid ObjectId.
    """
    return await EventService.get_event(db, event_id)


@router.post("", response_model=InsertAck)
async def create_event(
    event: Dict[str, Any] = Body(..., example={"name": "Fair", "date": "2025-05-01"}),
    db: Database = Depends(get_database),
) -> InsertAck:
    return await EventService.create_event(db, event)


@router.patch("/{event_id}", response_model=UpdateAck)
async def update_event(
    event_id: str,
    updates: Dict[str, Any] = Body(..., example={"name": "County Fair"}),
    db: Database = Depends(get_database),
) -> UpdateAck:
    """Merge ``updates`` into the event.

    Fields not mentioned keep their values.  ``_id`` and ``createdAt``
    in the body are ignored.
    """
    return await EventService.update_event(db, event_id, updates)


@router.delete("/{event_id}", response_model=DeleteAck)
async def delete_event(event_id: str, db: Database = Depends(get_database)) -> DeleteAck:
    return await EventService.delete_event(db, event_id)
