"""
Top‑level router for version 1 of the API.

Resource routers are mounted under their plural name.  The info router
(root banner and health check) has no prefix.
"""

from fastapi import APIRouter

from .endpoints import bookings, events, info, messages, users

router = APIRouter()

router.include_router(info.router, tags=["info"])
router.include_router(events.router, prefix="/events", tags=["events"])
router.include_router(bookings.router, prefix="/bookings", tags=["bookings"])
router.include_router(messages.router, prefix="/messages", tags=["messages"])
router.include_router(users.router, prefix="/users", tags=["users"])
