from __future__ import annotations

from typing import Any

from pydantic import Field, computed_field

from .base import DocumentModel


class LoginRequest(DocumentModel):
    email: str = Field(..., min_length=3)
    password: str = Field(..., min_length=1)


class AuthUser(DocumentModel):
    uid: str
    email: str | None = None
    claims: dict[str, Any] = Field(default_factory=dict, exclude=True)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_admin(self) -> bool:
        return self.claims.get("admin") is True


class Session(DocumentModel):
    id_token: str
    refresh_token: str
    expires_in: int
    user: AuthUser
