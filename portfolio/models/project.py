from __future__ import annotations

from datetime import datetime
from typing import Any, Literal, Mapping

from pydantic import Field, field_validator

from .base import DocumentModel
from .link import ProjectLink

ProjectStatus = Literal["draft", "published"]


class ProjectInput(DocumentModel):
    """Payload of the add/edit project form."""

    title: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    long_description: str | None = None
    category: str = Field(..., min_length=1)
    tech_stack: list[str] = []
    status: ProjectStatus = "draft"
    featured: bool = False
    images: list[str] = []  # inline data URLs, first one is the cover
    links: list[ProjectLink] = []

    @field_validator("title", "description", "category")
    @classmethod
    def _strip(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be blank")
        return value

    @field_validator("tech_stack")
    @classmethod
    def _dedupe_tech(cls, value: list[str]) -> list[str]:
        seen: list[str] = []
        for tech in (t.strip() for t in value):
            if tech and tech not in seen:
                seen.append(tech)
        return seen


class Project(DocumentModel):
    """A stored project. Lenient so records from older clients still load."""

    id: str
    title: str
    description: str = ""
    long_description: str | None = None
    category: str = ""
    tech_stack: list[str] = []
    status: ProjectStatus = "draft"
    featured: bool = False
    image_url: str | None = None
    images: list[str] = []
    links: list[ProjectLink] | None = None
    github_url: str | None = None
    demo_url: str | None = None
    order: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @field_validator("links", mode="before")
    @classmethod
    def _tolerate_link_types(cls, value: Any) -> Any:
        if isinstance(value, list):
            return [ProjectLink.from_stored(link) if isinstance(link, Mapping) else link for link in value]
        return value


class BulkDeleteRequest(DocumentModel):
    ids: list[str] = Field(..., min_length=1)


class BulkDeleteResult(DocumentModel):
    deleted: list[str] = []
    failed: list[str] = []
