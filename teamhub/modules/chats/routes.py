from fastapi import APIRouter, Depends
from teamhub.database.supabase_client import get_supabase
from teamhub.modules.chats.schemas import (
    DirectChatCreate, GroupChatCreate, DirectChatResponse, GroupChatResponse, ChatListResponse
)
from teamhub.modules.chats.service import ChatService
from supabase import Client
from typing import Optional

router = APIRouter(prefix="/chats", tags=["chats"])


def get_chat_service(supabase: Client = Depends(get_supabase)) -> ChatService:
    return ChatService(supabase)


@router.get("", response_model=ChatListResponse)
async def list_chats(
    user_id: Optional[str] = None,
    kind: Optional[str] = None,
    service: ChatService = Depends(get_chat_service)
):
    """List the user's direct chats and groups. kind=dm|group restricts to one of them."""
    return service.list_chats(user_id, kind)


@router.post("/direct", response_model=DirectChatResponse)
async def create_direct_chat(
    chat_data: DirectChatCreate,
    service: ChatService = Depends(get_chat_service)
):
    """Get or create the direct chat between two users (idempotent)"""
    return service.create_direct(chat_data)


@router.post("/groups", response_model=GroupChatResponse, status_code=201)
async def create_group_chat(
    group_data: GroupChatCreate,
    service: ChatService = Depends(get_chat_service)
):
    """Create a group chat"""
    return service.create_group(group_data)
