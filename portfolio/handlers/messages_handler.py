"""Contact form submission and the admin inbox."""
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Response

from portfolio.handlers.dependencies import get_message_service, require_admin
from portfolio.models import Message, MessageInput, MessageList, MessageReadUpdate
from portfolio.services.messages import MessageService

router = APIRouter(tags=["messages"])
admin_router = APIRouter(prefix="/api/admin/messages", tags=["messages"], dependencies=[Depends(require_admin)])
logger = logging.getLogger(__name__)


@router.post("/api/messages", status_code=201)
def submit_message(body: MessageInput, service: MessageService = Depends(get_message_service)):
    message = service.create(body)
    logger.info("Contact message %s received", message.id)
    return {"status": "received", "id": message.id}


@admin_router.get("", response_model=MessageList)
def inbox(service: MessageService = Depends(get_message_service)):
    return service.inbox()


@admin_router.patch("/{message_id}/read", response_model=Message)
def set_read(message_id: str, body: MessageReadUpdate, service: MessageService = Depends(get_message_service)):
    return service.set_read(message_id, body.read)


@admin_router.delete("/{message_id}", status_code=204)
def delete_message(message_id: str, service: MessageService = Depends(get_message_service)):
    service.delete(message_id)
    return Response(status_code=204)
