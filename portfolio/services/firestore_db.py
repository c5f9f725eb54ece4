"""Cloud Firestore helper utilities.

Wraps the document operations the portfolio needs over its top-level
collections:

/projects/{id}
/skills/{id}
/certifications/{id}
/experiences/{id}
/messages/{id}
/settings/profile

Documents are returned as plain dictionaries with their ``id`` merged in;
validation into models happens in the content services. Every SDK failure
is re-raised as ``RemoteOperationError`` so callers only deal with the
portfolio error taxonomy.
"""
from __future__ import annotations

import logging
from contextlib import contextmanager
from functools import lru_cache
from typing import Any, Iterator, Literal, Mapping, Sequence

from firebase_admin import firestore
from google.api_core import exceptions as gcp_exceptions
from google.cloud.firestore_v1.base_query import FieldFilter

from portfolio.errors import NotFoundError, RemoteOperationError
from portfolio.services.firebase_app import get_firebase_app

logger = logging.getLogger(__name__)

COLLECTIONS = {
    "projects": "projects",
    "skills": "skills",
    "messages": "messages",
    "settings": "settings",
    "experiences": "experiences",
    "certifications": "certifications",
}
SETTINGS_DOC_ID = "profile"

ASCENDING: Literal["ASCENDING"] = "ASCENDING"
DESCENDING: Literal["DESCENDING"] = "DESCENDING"
Direction = Literal["ASCENDING", "DESCENDING"]

SERVER_TIMESTAMP = firestore.SERVER_TIMESTAMP


@contextmanager
def _remote(operation: str, path: str) -> Iterator[None]:
    try:
        yield
    except gcp_exceptions.NotFound as exc:
        collection, _, doc_id = path.partition("/")
        raise NotFoundError(collection, doc_id) from exc
    except gcp_exceptions.GoogleAPIError as exc:
        logger.error("Firestore %s failed for %s: %s", operation, path, exc)
        raise RemoteOperationError(f"Failed to {operation} {path}") from exc


def _snapshot_to_dict(snapshot: Any) -> dict[str, Any]:
    return {"id": snapshot.id, **(snapshot.to_dict() or {})}


class FirestoreDB:
    """Wrapper around Firestore collection reads and writes."""

    def __init__(self, client: Any | None = None) -> None:
        self._client = client if client is not None else firestore.client(app=get_firebase_app())

    def _collection(self, name: str):
        return self._client.collection(name)

    # -------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------

    def get_all(
        self,
        collection: str,
        *,
        order_by: str | None = None,
        direction: Direction = ASCENDING,
        where_equals: Mapping[str, Any] | None = None,
        limit: int | None = None,
    ) -> list[dict[str, Any]]:
        query = self._collection(collection)
        for field, value in (where_equals or {}).items():
            query = query.where(filter=FieldFilter(field, "==", value))
        if order_by is not None:
            query = query.order_by(order_by, direction=direction)
        if limit is not None:
            query = query.limit(limit)

        with _remote("list", collection):
            snapshots = list(query.stream())
        return [_snapshot_to_dict(s) for s in snapshots]

    def get_one(self, collection: str, doc_id: str) -> dict[str, Any] | None:
        with _remote("read", f"{collection}/{doc_id}"):
            snapshot = self._collection(collection).document(doc_id).get()
        if not snapshot.exists:
            return None
        return _snapshot_to_dict(snapshot)

    def count(self, collection: str) -> int:
        with _remote("count", collection):
            results = self._collection(collection).count(alias="total").get()
        return int(results[0][0].value) if results and results[0] else 0

    # -------------------------------------------------------------------
    # Writes
    # -------------------------------------------------------------------

    def create(
        self,
        collection: str,
        fields: Mapping[str, Any],
        *,
        timestamps: Sequence[str] = ("createdAt", "updatedAt"),
    ) -> str:
        data = dict(fields)
        for name in timestamps:
            data[name] = SERVER_TIMESTAMP
        with _remote("create", collection):
            _, ref = self._collection(collection).add(data)
        logger.debug("Created %s/%s", collection, ref.id)
        return ref.id

    def update(
        self,
        collection: str,
        doc_id: str,
        fields: Mapping[str, Any],
        *,
        timestamps: Sequence[str] = ("updatedAt",),
    ) -> None:
        data = dict(fields)
        for name in timestamps:
            data[name] = SERVER_TIMESTAMP
        with _remote("update", f"{collection}/{doc_id}"):
            self._collection(collection).document(doc_id).update(data)
        logger.debug("Updated %s/%s", collection, doc_id)

    def set(
        self,
        collection: str,
        doc_id: str,
        fields: Mapping[str, Any],
        *,
        merge: bool = False,
        timestamps: Sequence[str] = ("updatedAt",),
    ) -> None:
        data = dict(fields)
        for name in timestamps:
            data[name] = SERVER_TIMESTAMP
        with _remote("write", f"{collection}/{doc_id}"):
            self._collection(collection).document(doc_id).set(data, merge=merge)
        logger.debug("Set %s/%s", collection, doc_id)

    def delete(self, collection: str, doc_id: str) -> None:
        with _remote("delete", f"{collection}/{doc_id}"):
            self._collection(collection).document(doc_id).delete()
        logger.debug("Deleted %s/%s", collection, doc_id)


@lru_cache()
def get_firestore_db() -> FirestoreDB:
    """Return the process-wide Firestore wrapper, created on first use."""

    return FirestoreDB()
