from __future__ import annotations

from datetime import datetime
from typing import Any, Literal

from pydantic import Field, field_validator

from .base import DocumentModel

ExperienceType = Literal["Magang", "Full-time", "Part-time", "Freelance", "Contract"]


class ExperienceInput(DocumentModel):
    position: str = Field(..., min_length=1)
    type: ExperienceType = "Full-time"
    company: str = Field(..., min_length=1)
    start_date: str = Field(..., min_length=1)
    end_date: str = ""
    location: str = ""
    description: str = ""
    skills: list[str] = []

    @field_validator("skills", mode="before")
    @classmethod
    def _split_skills(cls, value: Any) -> Any:
        # The form sends a comma-separated string
        if isinstance(value, str):
            value = value.split(",")
        if isinstance(value, list):
            return [s.strip() for s in value if isinstance(s, str) and s.strip()]
        return value


class Experience(DocumentModel):
    id: str
    position: str
    type: ExperienceType = "Full-time"
    company: str = ""
    start_date: str = ""
    end_date: str = ""
    location: str = ""
    description: str = ""
    skills: list[str] = []
    order: int = 0
    created_at: datetime | None = None
    updated_at: datetime | None = None
