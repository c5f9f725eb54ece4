"""In-memory stand-in for the subset of the Firestore client used by FirestoreDB."""
from __future__ import annotations

import copy
import itertools
from datetime import datetime, timedelta, timezone
from typing import Any, Iterator

from firebase_admin import firestore
from google.api_core import exceptions as gcp_exceptions

_EPOCH = datetime(2024, 1, 1, tzinfo=timezone.utc)
_MISSING = object()


class FakeSnapshot:
    def __init__(self, doc_id: str, data: dict[str, Any] | None) -> None:
        self.id = doc_id
        self._data = data

    @property
    def exists(self) -> bool:
        return self._data is not None

    def to_dict(self) -> dict[str, Any] | None:
        return copy.deepcopy(self._data) if self._data is not None else None


class FakeAggregationResult:
    def __init__(self, alias: str, value: int) -> None:
        self.alias = alias
        self.value = value


class FakeAggregationQuery:
    def __init__(self, query: "FakeQuery", alias: str | None) -> None:
        self._query = query
        self._alias = alias or "count"

    def get(self) -> list[list[FakeAggregationResult]]:
        self._query._store._check("count", self._query._name)
        return [[FakeAggregationResult(self._alias, len(list(self._query.stream())))]]


class FakeDocumentRef:
    def __init__(self, store: "FakeFirestore", collection: str, doc_id: str) -> None:
        self._store = store
        self._collection = collection
        self.id = doc_id

    @property
    def _docs(self) -> dict[str, dict[str, Any]]:
        return self._store.data.setdefault(self._collection, {})

    def get(self) -> FakeSnapshot:
        self._store._check("read", f"{self._collection}/{self.id}")
        return FakeSnapshot(self.id, self._docs.get(self.id))

    def set(self, data: dict[str, Any], merge: bool = False) -> None:
        self._store._check("write", f"{self._collection}/{self.id}")
        resolved = self._store._resolve(data)
        if merge and self.id in self._docs:
            self._docs[self.id].update(resolved)
        else:
            self._docs[self.id] = resolved

    def update(self, data: dict[str, Any]) -> None:
        self._store._check("update", f"{self._collection}/{self.id}")
        if self.id not in self._docs:
            raise gcp_exceptions.NotFound(f"No document to update: {self._collection}/{self.id}")
        self._docs[self.id].update(self._store._resolve(data))

    def delete(self) -> None:
        self._store._check("delete", f"{self._collection}/{self.id}")
        self._docs.pop(self.id, None)


class FakeQuery:
    def __init__(
        self,
        store: "FakeFirestore",
        name: str,
        filters: tuple = (),
        orders: tuple = (),
        max_results: int | None = None,
    ) -> None:
        self._store = store
        self._name = name
        self._filters = filters
        self._orders = orders
        self._limit = max_results

    def _copy(self, **changes: Any) -> "FakeQuery":
        state = {"filters": self._filters, "orders": self._orders, "max_results": self._limit, **changes}
        return FakeQuery(self._store, self._name, **state)

    def where(self, *, filter: Any) -> "FakeQuery":  # noqa: A002 - mirrors the SDK keyword
        assert filter.op_string == "==", "only equality filters are supported"
        return self._copy(filters=self._filters + ((filter.field_path, filter.value),))

    def order_by(self, field: str, direction: str = "ASCENDING") -> "FakeQuery":
        return self._copy(orders=self._orders + ((field, direction),))

    def limit(self, count: int) -> "FakeQuery":
        return self._copy(max_results=count)

    def count(self, alias: str | None = None) -> FakeAggregationQuery:
        return FakeAggregationQuery(self, alias)

    def stream(self) -> Iterator[FakeSnapshot]:
        self._store._check("list", self._name)
        docs = list(self._store.data.get(self._name, {}).items())
        for field, value in self._filters:
            docs = [(i, d) for i, d in docs if d.get(field, _MISSING) == value]
        for field, direction in reversed(self._orders):
            # Firestore leaves out documents that lack the ordering field
            docs = [(i, d) for i, d in docs if field in d]
            docs.sort(key=lambda item: item[1][field], reverse=direction == "DESCENDING")
        if self._limit is not None:
            docs = docs[: self._limit]
        for doc_id, data in docs:
            yield FakeSnapshot(doc_id, copy.deepcopy(data))


class FakeCollectionRef(FakeQuery):
    def document(self, doc_id: str | None = None) -> FakeDocumentRef:
        return FakeDocumentRef(self._store, self._name, doc_id or self._store._next_id())

    def add(self, data: dict[str, Any]) -> tuple[datetime, FakeDocumentRef]:
        self._store._check("create", self._name)
        ref = self.document()
        self._store.data.setdefault(self._name, {})[ref.id] = self._store._resolve(data)
        return self._store._now(), ref


class FakeFirestore:
    """Holds documents as ``data[collection][doc_id] = dict``."""

    def __init__(self) -> None:
        self.data: dict[str, dict[str, dict[str, Any]]] = {}
        self.failures: dict[tuple[str, str], Exception] = {}
        self._ids = itertools.count(1)
        self._ticks = itertools.count(1)

    def collection(self, name: str) -> FakeCollectionRef:
        return FakeCollectionRef(self, name)

    def seed(self, collection: str, doc_id: str, data: dict[str, Any]) -> None:
        self.data.setdefault(collection, {})[doc_id] = copy.deepcopy(data)

    def fail(self, operation: str, path: str, exc: Exception | None = None) -> None:
        """Make ``operation`` on ``path`` (``collection`` or ``collection/id``) raise."""
        self.failures[(operation, path)] = exc or gcp_exceptions.ServiceUnavailable("backend unavailable")

    def _check(self, operation: str, path: str) -> None:
        exc = self.failures.get((operation, path))
        if exc is not None:
            raise exc

    def _next_id(self) -> str:
        return f"doc{next(self._ids)}"

    def _now(self) -> datetime:
        return _EPOCH + timedelta(seconds=next(self._ticks))

    def _resolve(self, data: dict[str, Any]) -> dict[str, Any]:
        resolved = copy.deepcopy({k: v for k, v in data.items() if v is not firestore.SERVER_TIMESTAMP})
        for key, value in data.items():
            if value is firestore.SERVER_TIMESTAMP:
                resolved[key] = self._now()
        return resolved
