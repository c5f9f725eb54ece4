"""CRUD services for the portfolio collections.

Each service owns one Firestore collection: how it is ordered, which
timestamps are stamped on write, and the form rules that must hold before
anything is written. Reads always go back to Firestore; nothing is cached.
"""
from __future__ import annotations

import logging
from typing import Any, ClassVar, Generic, Sequence, TypeVar

from portfolio.errors import NotFoundError, ValidationError
from portfolio.models import Certificate, CertificateInput, Experience, Skill, SkillInput
from portfolio.models.base import DocumentModel
from portfolio.services.firestore_db import ASCENDING, COLLECTIONS, Direction, FirestoreDB
from portfolio.services.images import ensure_document_fits

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=DocumentModel)


class CollectionService(Generic[RecordT]):
    """List/get/create/update/delete over a single collection."""

    collection: ClassVar[str]
    model: ClassVar[type[DocumentModel]]
    order_by: ClassVar[str] = "order"
    direction: ClassVar[Direction] = ASCENDING
    ordered: ClassVar[bool] = True  # new documents get ``order`` = collection size
    create_timestamps: ClassVar[Sequence[str]] = ("createdAt", "updatedAt")
    update_timestamps: ClassVar[Sequence[str]] = ("updatedAt",)

    def __init__(self, db: FirestoreDB) -> None:
        self._db = db

    def list(self, **where_equals: Any) -> list[RecordT]:
        docs = self._db.get_all(
            self.collection,
            order_by=self.order_by,
            direction=self.direction,
            where_equals=where_equals or None,
        )
        return [self.model.model_validate(doc) for doc in docs]  # type: ignore[misc]

    def get(self, doc_id: str) -> RecordT:
        doc = self._db.get_one(self.collection, doc_id)
        if doc is None:
            raise NotFoundError(self.collection, doc_id)
        return self.model.model_validate(doc)  # type: ignore[return-value]

    def create(self, payload: DocumentModel) -> RecordT:
        fields = self.prepare(payload, existing=None)
        if self.ordered:
            fields["order"] = self._db.count(self.collection)
        ensure_document_fits(fields)
        doc_id = self._db.create(self.collection, fields, timestamps=self.create_timestamps)
        logger.info("Created %s/%s", self.collection, doc_id)
        return self.get(doc_id)

    def update(self, doc_id: str, payload: DocumentModel) -> RecordT:
        existing = self.get(doc_id)
        fields = self.prepare(payload, existing=existing)
        ensure_document_fits(fields)
        self._db.update(self.collection, doc_id, fields, timestamps=self.update_timestamps)
        logger.info("Updated %s/%s", self.collection, doc_id)
        return self.get(doc_id)

    def delete(self, doc_id: str) -> None:
        self._db.delete(self.collection, doc_id)
        logger.info("Deleted %s/%s", self.collection, doc_id)

    def prepare(self, payload: Any, *, existing: Any) -> dict[str, Any]:
        """Turn a validated form payload into document fields.

        Raise ``ValidationError`` here for rules that need the stored data.
        """
        return payload.to_document()


class SkillService(CollectionService[Skill]):
    collection = COLLECTIONS["skills"]
    model = Skill
    create_timestamps = ()
    update_timestamps = ()

    def prepare(self, payload: SkillInput, *, existing: Skill | None) -> dict[str, Any]:
        name = payload.name.lower()
        for skill in self.list():
            if skill.name.lower() == name and (existing is None or skill.id != existing.id):
                raise ValidationError(f'Skill "{payload.name}" already exists!')
        fields = payload.to_document()
        fields["icon"] = payload.icon or ""
        return fields


class CertificateService(CollectionService[Certificate]):
    collection = COLLECTIONS["certifications"]
    model = Certificate

    def prepare(self, payload: CertificateInput, *, existing: Certificate | None) -> dict[str, Any]:
        if not payload.image_url:
            raise ValidationError("Please upload a certificate image")
        fields = payload.to_document()
        fields["credentialUrl"] = payload.credential_url or None
        fields["issueDate"] = payload.issue_date or None
        return fields


class ExperienceService(CollectionService[Experience]):
    collection = COLLECTIONS["experiences"]
    model = Experience