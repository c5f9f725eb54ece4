"""Contact messages: public submission and the admin inbox."""
from __future__ import annotations

from typing import Any

from portfolio.models import Message, MessageInput, MessageList
from portfolio.services.content import CollectionService
from portfolio.services.firestore_db import COLLECTIONS, DESCENDING


class MessageService(CollectionService[Message]):
    collection = COLLECTIONS["messages"]
    model = Message
    order_by = "createdAt"
    direction = DESCENDING
    ordered = False
    create_timestamps = ("createdAt",)

    def prepare(self, payload: MessageInput, *, existing: Message | None) -> dict[str, Any]:
        fields = payload.to_document()
        fields["email"] = str(payload.email)
        fields["read"] = False if existing is None else existing.read
        return fields

    def inbox(self) -> MessageList:
        messages = self.list()
        return MessageList(messages=messages, unread_count=sum(1 for m in messages if not m.read))

    def set_read(self, doc_id: str, read: bool = True) -> Message:
        message = self.get(doc_id)
        self._db.update(self.collection, doc_id, {"read": read}, timestamps=())
        return message.model_copy(update={"read": read})
