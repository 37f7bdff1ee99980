from pydantic import BaseModel
from typing import Optional, List
from datetime import datetime


class UserRegister(BaseModel):
    name: str
    email: Optional[str] = None
    provider: str = "email"  # email, google, twitter, discord
    provider_id: Optional[str] = None


class UserStatusUpdate(BaseModel):
    status: str  # online, offline, away


class UserResponse(BaseModel):
    id: str
    name: str
    email: Optional[str] = None
    avatar: Optional[str] = None
    status: str = "offline"
    provider: str = "email"
    provider_id: Optional[str] = None
    created_at: datetime
    last_login_at: Optional[datetime] = None


class UserPublicResponse(BaseModel):
    id: str
    name: str
    avatar: Optional[str] = None
    status: str = "offline"
    provider: str = "email"


class UserRegisterResponse(BaseModel):
    user: UserResponse
    is_new: bool


class UserSearchResponse(BaseModel):
    users: List[UserPublicResponse]
