"""
User endpoints for API v1.

The frontend registers a user after sign‑up and then loads the profile
by email to find out the role.
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends
from pymongo.database import Database

from srevent_api.app.core.db import get_database
from srevent_api.app.schemas.common import DeleteAck, InsertAck
from srevent_api.app.schemas.user import UserRead
from srevent_api.app.services.user_service import UserService


router = APIRouter()


@router.get("", response_model=List[UserRead])
async def list_users(db: Database = Depends(get_database)) -> List[Dict[str, Any]]:
    return await UserService.list_users(db)


@router.post("", response_model=InsertAck)
async def create_user(
    user: Dict[str, Any] = Body(..., example={"name": "Ann", "email": "ann@x.com"}),
    db: Database = Depends(get_database),
) -> InsertAck:
    """Register a user.  The role is always ``user`` on creation."""
    return await UserService.create_user(db, user)


@router.get("/id/{user_id}", response_model=Optional[UserRead])
async def get_user(user_id: str, db: Database = Depends(get_database)) -> Optional[Dict[str, Any]]:
    return await UserService.get_user(db, user_id)


@router.get("/{email}", response_model=Optional[UserRead])
async def get_user_by_email(email: str, db: Database = Depends(get_database)) -> Optional[Dict[str, Any]]:
    """Look a user up by exact email; ``null`` when there is none."""
    return await UserService.get_user_by_email(db, email)


@router.delete("/{user_id}", response_model=DeleteAck)
async def delete_user(user_id: str, db: Database = Depends(get_database)) -> DeleteAck:
    return await UserService.delete_user(db, user_id)
