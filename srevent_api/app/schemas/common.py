"""
Shared models: the document base class and store acknowledgements.

Acknowledgements use the same camelCase keys the original JavaScript
frontend already reads (``insertedId``, ``matchedCount`` and so on).
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class DocumentRead(BaseModel):
    """A stored document with its lifecycle fields.

    Any additional field present in the store is passed through as is.
    Field types are left open because documents are stored as sent.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: Any = Field(..., alias="_id", example="6650c1f2a9b8e4d1c2f3a4b5")
    createdAt: Optional[Any] = None
    updatedAt: Optional[Any] = None


class InsertAck(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    acknowledged: bool = True
    inserted_id: str = Field(..., alias="insertedId")


class UpdateAck(BaseModel):
    """Result of an update.  ``matchedCount`` is zero when no document has the id."""

    model_config = ConfigDict(populate_by_name=True)

    acknowledged: bool = True
    matched_count: int = Field(..., alias="matchedCount")
    modified_count: int = Field(..., alias="modifiedCount")
    upserted_id: Optional[str] = Field(None, alias="upsertedId")
    upserted_count: int = Field(0, alias="upsertedCount")


class DeleteAck(BaseModel):
    """Result of a delete.  ``deletedCount`` is 0 or 1."""

    model_config = ConfigDict(populate_by_name=True)

    acknowledged: bool = True
    deleted_count: int = Field(..., alias="deletedCount")
