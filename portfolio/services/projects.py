"""Project collection service: links, inline gallery and bulk delete."""
from __future__ import annotations

import asyncio
import logging
from typing import Any, Iterable

from portfolio.errors import NotFoundError, PortfolioError
from portfolio.models import BulkDeleteResult, Project, ProjectInput
from portfolio.services.content import CollectionService
from portfolio.services.firestore_db import COLLECTIONS, DESCENDING
from portfolio.services.links import links_for_editing, reconcile_links

logger = logging.getLogger(__name__)


class ProjectService(CollectionService[Project]):
    collection = COLLECTIONS["projects"]
    model = Project
    order_by = "createdAt"
    direction = DESCENDING

    def prepare(self, payload: ProjectInput, *, existing: Project | None) -> dict[str, Any]:
        fields = payload.to_document(exclude={"links", "images"})
        # links, githubUrl and demoUrl always go out in the same write
        fields.update(reconcile_links(payload.links).to_fields())
        fields["images"] = list(payload.images)
        fields["imageUrl"] = payload.images[0] if payload.images else None
        return fields

    # -------------------------------------------------------------------
    # Public site
    # -------------------------------------------------------------------

    def list_published(self, *, category: str | None = None, featured: bool | None = None) -> list[Project]:
        where: dict[str, Any] = {"status": "published"}
        if category:
            where["category"] = category
        if featured is not None:
            where["featured"] = featured
        return self.list(**where)

    def get_published(self, doc_id: str) -> Project:
        project = self.get(doc_id)
        if project.status != "published":
            raise NotFoundError(self.collection, doc_id)
        return project

    # -------------------------------------------------------------------
    # Admin
    # -------------------------------------------------------------------

    def get_for_editing(self, doc_id: str) -> Project:
        """Load a project the way the edit form needs it.

        Legacy documents get a ``links`` list built from their scalar URLs and
        an ``images`` list built from their single ``imageUrl``.
        """

        doc = self._db.get_one(self.collection, doc_id)
        if doc is None:
            raise NotFoundError(self.collection, doc_id)
        images = doc.get("images") or ([doc["imageUrl"]] if doc.get("imageUrl") else [])
        links = [link.to_document() for link in links_for_editing(doc)]
        return Project.model_validate({**doc, "images": images, "links": links})

    async def bulk_delete(self, ids: Iterable[str]) -> BulkDeleteResult:
        """Delete several projects concurrently and report each outcome."""

        unique_ids = list(dict.fromkeys(ids))
        outcomes = await asyncio.gather(
            *(asyncio.to_thread(self.delete, doc_id) for doc_id in unique_ids),
            return_exceptions=True,
        )

        result = BulkDeleteResult()
        for doc_id, outcome in zip(unique_ids, outcomes):
            if isinstance(outcome, PortfolioError):
                logger.warning("Bulk delete failed for %s/%s: %s", self.collection, doc_id, outcome.message)
                result.failed.append(doc_id)
            elif isinstance(outcome, BaseException):
                raise outcome
            else:
                result.deleted.append(doc_id)
        logger.info("Bulk deleted %d/%d projects", len(result.deleted), len(unique_ids))
        return result
