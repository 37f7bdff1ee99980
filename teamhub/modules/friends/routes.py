from fastapi import APIRouter, Depends
from teamhub.database.supabase_client import get_supabase
from teamhub.modules.friends.schemas import (
    FriendRequestCreate, FriendRequestResponse, FriendListResponse, FriendRequestListResponse
)
from teamhub.modules.friends.service import FriendService
from supabase import Client
from typing import Optional

router = APIRouter(prefix="/friends", tags=["friends"])


def get_friend_service(supabase: Client = Depends(get_supabase)) -> FriendService:
    return FriendService(supabase)


@router.get("", response_model=FriendListResponse)
async def list_friends(
    user_id: Optional[str] = None,
    service: FriendService = Depends(get_friend_service)
):
    """List the user's friends"""
    return FriendListResponse(friends=service.list_friends(user_id))


@router.get("/requests", response_model=FriendRequestListResponse)
async def list_friend_requests(
    user_id: Optional[str] = None,
    direction: str = "received",
    service: FriendService = Depends(get_friend_service)
):
    """Pending requests received by (direction=received) or sent by (direction=sent) the user"""
    return FriendRequestListResponse(requests=service.list_requests(user_id, direction))


@router.post("/requests", response_model=FriendRequestResponse, status_code=201)
async def send_friend_request(
    request_data: FriendRequestCreate,
    service: FriendService = Depends(get_friend_service)
):
    """Send a friend request"""
    return service.send_request(request_data)


@router.post("/requests/{request_id}/accept", response_model=FriendRequestResponse)
async def accept_friend_request(
    request_id: int,
    service: FriendService = Depends(get_friend_service)
):
    """Accept a friend request"""
    return service.respond(request_id, accept=True)


@router.post("/requests/{request_id}/reject", response_model=FriendRequestResponse)
async def reject_friend_request(
    request_id: int,
    service: FriendService = Depends(get_friend_service)
):
    """Reject a friend request"""
    return service.respond(request_id, accept=False)
