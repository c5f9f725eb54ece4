"""Error taxonomy shared by services and handlers.

Every error carries a user-facing ``message`` and the HTTP status the API
layer renders it with. None of them is fatal: the exception handler in
``portfolio.main`` turns each into a ``{"detail": ...}`` response.
"""
from __future__ import annotations


class PortfolioError(Exception):
    """Base class for errors surfaced to API callers."""

    status_code = 500

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(PortfolioError):
    """User input failed a constraint. No write was attempted."""

    status_code = 400


class ImageProcessingError(PortfolioError):
    """An image could not be decoded, rendered or re-encoded."""

    status_code = 422


class RemoteOperationError(PortfolioError):
    """A database or auth call was rejected or could not reach the service."""

    status_code = 502


class NotFoundError(PortfolioError):
    """The requested document does not exist."""

    status_code = 404

    def __init__(self, collection: str, doc_id: str) -> None:
        super().__init__(f"{collection}/{doc_id} not found")
        self.collection = collection
        self.doc_id = doc_id
