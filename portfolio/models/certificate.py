from __future__ import annotations

from datetime import datetime

from pydantic import Field

from .base import DocumentModel


class CertificateInput(DocumentModel):
    name: str = Field(..., min_length=1)
    issuer: str = Field(..., min_length=1)
    image_url: str = ""
    credential_url: str | None = None
    issue_date: str | None = None


class Certificate(DocumentModel):
    id: str
    name: str
    issuer: str = ""
    image_url: str = ""
    credential_url: str | None = None
    issue_date: str | None = None
    order: int = 0
    created_at: datetime | None = None
    updated_at: datetime | None = None
