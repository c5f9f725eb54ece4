from __future__ import annotations

from datetime import datetime

from pydantic import EmailStr, Field

from .base import DocumentModel


class MessageInput(DocumentModel):
    """Contact form submission."""

    name: str = Field(..., min_length=2)
    email: EmailStr
    subject: str = Field(..., min_length=1)
    message: str = Field(..., min_length=10)


class Message(DocumentModel):
    id: str
    name: str
    email: str
    subject: str = ""
    message: str = ""
    read: bool = False
    created_at: datetime | None = None


class MessageReadUpdate(DocumentModel):
    read: bool = True


class MessageList(DocumentModel):
    messages: list[Message]
    unread_count: int
