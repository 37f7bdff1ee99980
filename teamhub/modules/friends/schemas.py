from pydantic import BaseModel
from typing import Optional, List
from datetime import datetime


class FriendRequestCreate(BaseModel):
    from_user_id: str
    to_user_id: str


class FriendProfile(BaseModel):
    id: str
    name: str
    avatar: Optional[str] = None
    provider: Optional[str] = None


class FriendRequestResponse(BaseModel):
    id: int
    from_user_id: str
    to_user_id: str
    status: str
    created_at: datetime
    from_user: Optional[FriendProfile] = None
    to_user: Optional[FriendProfile] = None


class FriendListResponse(BaseModel):
    friends: List[FriendProfile]


class FriendRequestListResponse(BaseModel):
    requests: List[FriendRequestResponse]
