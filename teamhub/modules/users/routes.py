from fastapi import APIRouter, Depends
from teamhub.database.supabase_client import get_supabase
from teamhub.modules.users.schemas import (
    UserRegister, UserStatusUpdate, UserResponse, UserRegisterResponse, UserSearchResponse
)
from teamhub.modules.users.service import UserService
from supabase import Client
from typing import Optional

router = APIRouter(prefix="/users", tags=["users"])


def get_user_service(supabase: Client = Depends(get_supabase)) -> UserService:
    return UserService(supabase)


@router.post("", response_model=UserRegisterResponse)
async def register_or_login(
    user_data: UserRegister,
    service: UserService = Depends(get_user_service)
):
    """Register a new user, or log in as the existing one with the same provider id or name"""
    return service.register_or_login(user_data)


@router.get("", response_model=UserSearchResponse)
async def search_users(
    q: Optional[str] = None,
    service: UserService = Depends(get_user_service)
):
    """Search users by name or id (public fields only)"""
    return UserSearchResponse(users=service.search_users(q))


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: str,
    service: UserService = Depends(get_user_service)
):
    """Get user by ID"""
    return service.get_user_by_id(user_id)


@router.patch("/{user_id}/status", response_model=UserResponse)
async def set_user_status(
    user_id: str,
    status_data: UserStatusUpdate,
    service: UserService = Depends(get_user_service)
):
    """Set presence status (online/offline/...)"""
    return service.set_status(user_id, status_data.status)
