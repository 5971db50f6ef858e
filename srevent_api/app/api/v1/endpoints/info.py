"""
Root banner and health check.

``GET /`` keeps the plain text banner that uptime monitors already look
for.  ``GET /health`` reports whether the document store answers and
never fails itself.
"""

import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse
from pymongo.database import Database

from srevent_api.app.core.db import get_database, list_collections
from srevent_api.app.core.errors import StoreUnavailable

router = APIRouter()


@router.get("/", response_class=PlainTextResponse)
async def root() -> str:
    return "Event Planner API is Running..."


@router.get("/health", response_model=Dict[str, Any])
async def health(db: Database = Depends(get_database)) -> Dict[str, Any]:
    """Report the database name, reachability and its collections."""
    response: Dict[str, Any] = {
        "status": "ok",
        "database": db.name,
        "store": "connected",
        "collections": [],
    }
    try:
        response["collections"] = await list_collections(db)
    except StoreUnavailable as exc:
        logging.getLogger(__name__).warning("Health check could not reach the store: %s", exc)
        response["store"] = "unavailable"
    return response
