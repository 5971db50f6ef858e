"""
Pydantic models for event documents.

Events carry no status field; apart from the identity and timestamps
their shape is whatever the client sent (``name``, ``date``,
``location``...), or the ``EventName``/``Genre``/``Price`` subset when
the legacy field list is configured.
"""

from .common import DocumentRead


class EventRead(DocumentRead):
    """Schema for reading an event from the API."""
    pass
