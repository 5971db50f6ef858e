"""
Error types raised by the service layer and their HTTP mapping.

Three failures are errors: a path identifier that is not a valid
ObjectId, a write the store refuses because of its content (bad field
names, duplicate keys, oversized documents), and a store that cannot be
reached.  "Nothing found" and "nothing matched" are ordinary results
and never pass through here.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse


logger = logging.getLogger(__name__)


class MalformedIdentifier(ValueError):
    """Raised when an identifier does not parse as a store identity."""

    def __init__(self, value: str) -> None:
        super().__init__(f"Invalid identifier: {value}")
        self.value = value


class StoreUnavailable(RuntimeError):
    """Raised when the document store cannot be reached or refuses the connection."""


class RejectedDocument(ValueError):
    """Raised when the store refuses a write because of the document itself."""


async def malformed_identifier_handler(request: Request, exc: MalformedIdentifier) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": str(exc)})


async def rejected_document_handler(request: Request, exc: RejectedDocument) -> JSONResponse:
    logger.warning("Store rejected a write on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": f"Document rejected by the store: {exc}"},
    )


async def store_unavailable_handler(request: Request, exc: StoreUnavailable) -> JSONResponse:
    logger.error("Store call failed on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": "Document store unavailable"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the handlers for service‑layer errors to ``app``."""
    app.add_exception_handler(MalformedIdentifier, malformed_identifier_handler)
    app.add_exception_handler(StoreUnavailable, store_unavailable_handler)
    app.add_exception_handler(RejectedDocument, rejected_document_handler)
