"""
Shared lifecycle for document collections.

Every collection follows the same rules:

* ``createdAt`` and ``updatedAt`` are stamped with the same instant on
  insert; ``createdAt`` is never written again.
* ``updatedAt`` is refreshed by every update.
* The identity (``_id``) is assigned by the store and never taken from
  the caller.
* Status and role fields get a default on insert but any later value is
  stored as sent.

Collections differ only in the class attributes below, most notably in
how an update is applied: a *full‑merge* update (``update_fields`` is
``None``) sets every field of the payload, while a *narrow* update sets
only ``update_fields`` plus ``annotation_field`` and ignores the rest.
"""

import logging
from typing import Any, ClassVar, Dict, List, Mapping, Optional, Sequence, Tuple

from pymongo.collection import Collection
from pymongo.database import Database

from ..core.db import parse_object_id, run_store_call, serialize_document, utcnow
from ..schemas.common import DeleteAck, InsertAck, UpdateAck


logger = logging.getLogger(__name__)

# Fields the caller can never set through a payload.
_IMMUTABLE_ON_UPDATE = ("_id", "createdAt")


class DocumentService:
    """Base service; subclasses bind it to one collection."""

    collection_name: ClassVar[str] = ""
    defaults: ClassVar[Dict[str, Any]] = {}
    update_fields: ClassVar[Optional[Tuple[str, ...]]] = None
    annotation_field: ClassVar[Optional[str]] = None

    @classmethod
    def carried_fields(cls) -> Optional[Sequence[str]]:
        """Whitelist of payload fields kept on create/full‑merge, or ``None`` for all."""
        return None

    @classmethod
    def collection(cls, db: Database) -> Collection:
        return db[cls.collection_name]

    @classmethod
    def _filter_payload(cls, payload: Mapping[str, Any], drop: Sequence[str]) -> Dict[str, Any]:
        carried = cls.carried_fields()
        return {
            key: value
            for key, value in payload.items()
            if key not in drop and (carried is None or key in carried)
        }

    @classmethod
    def build_document(cls, payload: Mapping[str, Any]) -> Dict[str, Any]:
        """Return the document to insert for ``payload``."""
        now = utcnow()
        document = cls._filter_payload(payload, drop=("_id",))
        document.update(cls.defaults)
        document["createdAt"] = now
        document["updatedAt"] = now
        return document

    @classmethod
    def build_changes(cls, payload: Mapping[str, Any]) -> Dict[str, Any]:
        """Return the ``$set`` document for an update with ``payload``."""
        if cls.update_fields is None:
            changes = cls._filter_payload(payload, drop=_IMMUTABLE_ON_UPDATE)
        else:
            # Absent fields are written as null, not skipped.
            changes = {field: payload.get(field) for field in cls.update_fields}
            if cls.annotation_field:
                changes[cls.annotation_field] = payload.get(cls.annotation_field) or ""
        changes["updatedAt"] = utcnow()
        return changes

    @classmethod
    async def list_all(cls, db: Database) -> List[Dict[str, Any]]:
        """Return every document in store order."""
        return await cls.find_by(db, {})

    @classmethod
    async def find_by(cls, db: Database, query: Mapping[str, Any]) -> List[Dict[str, Any]]:
        collection = cls.collection(db)
        documents = await run_store_call(lambda: list(collection.find(dict(query))))
        return [serialize_document(doc) for doc in documents]

    @classmethod
    async def find_one_by(cls, db: Database, query: Mapping[str, Any]) -> Optional[Dict[str, Any]]:
        document = await run_store_call(cls.collection(db).find_one, dict(query))
        if document is None:
            return None
        return serialize_document(document)

    @classmethod
    async def get(cls, db: Database, document_id: str) -> Optional[Dict[str, Any]]:
        """Return the document with ``document_id`` or ``None``.

        Raises ``MalformedIdentifier`` before touching the store when
        the id is not a valid ObjectId.
        """
        object_id = parse_object_id(document_id)
        return await cls.find_one_by(db, {"_id": object_id})

    @classmethod
    async def create(cls, db: Database, payload: Mapping[str, Any]) -> InsertAck:
        document = cls.build_document(payload)
        result = await run_store_call(cls.collection(db).insert_one, document)
        logger.info("Inserted %s into %s", result.inserted_id, cls.collection_name)
        return InsertAck(acknowledged=result.acknowledged, inserted_id=str(result.inserted_id))

    @classmethod
    async def update(cls, db: Database, document_id: str, payload: Mapping[str, Any]) -> UpdateAck:
        """Apply ``payload`` to the document with ``document_id``.

        A missing document is reported through ``matchedCount == 0``.
        """
        object_id = parse_object_id(document_id)
        changes = cls.build_changes(payload)
        result = await run_store_call(
            cls.collection(db).update_one, {"_id": object_id}, {"$set": changes}
        )
        logger.info(
            "Updated %s in %s (matched=%d, modified=%d)",
            document_id,
            cls.collection_name,
            result.matched_count,
            result.modified_count,
        )
        upserted_id = str(result.upserted_id) if result.upserted_id is not None else None
        return UpdateAck(
            acknowledged=result.acknowledged,
            matched_count=result.matched_count,
            modified_count=result.modified_count,
            upserted_id=upserted_id,
            upserted_count=1 if upserted_id else 0,
        )

    @classmethod
    async def delete(cls, db: Database, document_id: str) -> DeleteAck:
        object_id = parse_object_id(document_id)
        result = await run_store_call(cls.collection(db).delete_one, {"_id": object_id})
        logger.info("Deleted %s from %s (count=%d)", document_id, cls.collection_name, result.deleted_count)
        return DeleteAck(acknowledged=result.acknowledged, deleted_count=result.deleted_count)
