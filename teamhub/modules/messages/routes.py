from fastapi import APIRouter, Depends
from teamhub.database.supabase_client import get_supabase, get_service_supabase
from teamhub.modules.messages.schemas import (
    MessageCreate, MessageReplace, MessageResponse, MessageListResponse, MessageReplaceResponse
)
from teamhub.modules.messages.service import MessageService
from supabase import Client
from typing import Optional

router = APIRouter(prefix="/messages", tags=["messages"])


def get_message_service(supabase: Client = Depends(get_supabase)) -> MessageService:
    return MessageService(supabase)


def get_bulk_message_service(supabase: Client = Depends(get_service_supabase)) -> MessageService:
    return MessageService(supabase)


@router.get("", response_model=MessageListResponse)
async def list_messages(
    chat_id: Optional[str] = None,
    after: Optional[str] = None,
    service: MessageService = Depends(get_message_service)
):
    """Latest messages of a chat, or only those newer than the `after` message id (polling)"""
    return MessageListResponse(messages=service.list_messages(chat_id, after))


@router.post("", response_model=MessageResponse, status_code=201)
async def send_message(
    message_data: MessageCreate,
    service: MessageService = Depends(get_message_service)
):
    """Append a message to a chat"""
    return service.send_message(message_data)


@router.put("/{chat_id}", response_model=MessageReplaceResponse)
async def replace_messages(
    chat_id: str,
    replace_data: MessageReplace,
    service: MessageService = Depends(get_bulk_message_service)
):
    """Replace a chat's whole history (not atomic, see MessageService.replace_messages)"""
    return service.replace_messages(chat_id, replace_data.messages)
