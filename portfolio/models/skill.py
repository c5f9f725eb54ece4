from __future__ import annotations

from pydantic import Field, field_validator

from .base import DocumentModel


class SkillInput(DocumentModel):
    name: str = Field(..., min_length=1)
    category: str = "Frontend"
    icon: str | None = None  # icon URL or inline data URL
    level: int = Field(80, ge=0, le=100)

    @field_validator("name")
    @classmethod
    def _strip_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be blank")
        return value


class Skill(DocumentModel):
    id: str
    name: str
    category: str = "Other"
    icon: str | None = None
    level: int = 0
    order: int = 0
