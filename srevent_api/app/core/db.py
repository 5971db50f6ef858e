"""
MongoDB integration.

This module owns everything that touches the driver directly: building
the long‑lived ``MongoClient``, the FastAPI dependency that hands the
database to route handlers, identifier parsing, and conversion of
stored documents into JSON‑safe data.

The client is created once at application startup (see ``main.py``),
kept on ``app.state`` and closed at shutdown.  Requests never open
their own connections.

pymongo is a blocking driver, so every store call goes through
``run_store_call`` which executes it on the thread pool and turns
driver failures into ``RejectedDocument`` or ``StoreUnavailable``.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Mapping, TypeVar

from bson import ObjectId
from bson.errors import InvalidDocument
from fastapi import Request
from fastapi.concurrency import run_in_threadpool
from pymongo import MongoClient
from pymongo.database import Database
from pymongo.errors import PyMongoError, WriteError
from pymongo.server_api import ServerApi

from .config import Settings
from .errors import MalformedIdentifier, RejectedDocument, StoreUnavailable


logger = logging.getLogger(__name__)

T = TypeVar("T")


def create_client(settings: Settings) -> MongoClient:
    """Build the process‑wide client.

    Construction does not block on the network; the first operation (or
    ``ping``) does.  Stable API v1 is requested in strict mode.
    """
    return MongoClient(
        settings.mongodb_uri,
        server_api=ServerApi("1", strict=True, deprecation_errors=True),
        serverSelectionTimeoutMS=settings.server_selection_timeout_ms,
    )


async def ping(client: MongoClient) -> bool:
    """Return ``True`` if the deployment answers a ``ping`` command."""
    try:
        await run_in_threadpool(client.admin.command, "ping")
    except PyMongoError as exc:
        logger.error("Database connection error: %s", exc)
        return False
    return True


def get_database(request: Request) -> Database:
    """FastAPI dependency returning the database opened at startup."""
    return request.app.state.db


async def run_store_call(func: Callable[..., T], *args: Any, **kwargs: Any) -> T:
    """Run a blocking driver call on the thread pool.

    Writes refused because of the document (``WriteError``, including
    duplicate keys, and ``InvalidDocument``, including oversized
    documents) become ``RejectedDocument``.  Any other ``PyMongoError``
    (network, authentication, server selection timeout) becomes
    ``StoreUnavailable``.  No retry is attempted.
    """
    try:
        return await run_in_threadpool(func, *args, **kwargs)
    except (WriteError, InvalidDocument) as exc:
        raise RejectedDocument(str(exc)) from exc
    except PyMongoError as exc:
        raise StoreUnavailable(str(exc)) from exc


async def list_collections(db: Database) -> List[str]:
    return sorted(await run_store_call(db.list_collection_names))


def parse_object_id(value: str) -> ObjectId:
    """Parse ``value`` as an ObjectId or raise ``MalformedIdentifier``."""
    if not isinstance(value, str) or not ObjectId.is_valid(value):
        raise MalformedIdentifier(str(value))
    return ObjectId(value)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _serialize_value(value: Any) -> Any:
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, datetime):
        # The driver hands back naive datetimes that are already UTC.
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)
    if isinstance(value, Mapping):
        return {key: _serialize_value(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_serialize_value(item) for item in value]
    return value


def serialize_document(document: Mapping[str, Any]) -> Dict[str, Any]:
    """Return a JSON‑safe copy of a stored document.

    ObjectIds become their 24‑character hex form and datetimes become
    timezone‑aware UTC values, at any nesting depth.
    """
    return _serialize_value(document)
