from pydantic import BaseModel, Field, field_validator
from typing import Optional, List, Dict, Any
from datetime import datetime


class DirectChatCreate(BaseModel):
    user_id: str
    friend_id: str


class GroupChatCreate(BaseModel):
    name: str
    icon: Optional[str] = None
    description: Optional[str] = None
    creator_id: Optional[str] = None
    members: Optional[List[Dict[str, Any]]] = None


class CounterpartProfile(BaseModel):
    id: str
    name: str = "Unknown"
    avatar: str = "?"
    status: str = "offline"


class DirectChatResponse(BaseModel):
    id: str
    type: str = "dm"
    name: str
    other_user: CounterpartProfile
    created_at: datetime


class GroupChatResponse(BaseModel):
    id: str
    type: str = "group"
    name: str
    icon: Optional[str] = None
    description: str = ""
    creator_id: Optional[str] = None
    members: List[Dict[str, Any]] = Field(default_factory=list)
    created_at: datetime

    @field_validator("members", mode="before")
    @classmethod
    def _members_default(cls, v):
        return v or []

    @field_validator("description", mode="before")
    @classmethod
    def _description_default(cls, v):
        return v or ""


class ChatListResponse(BaseModel):
    dms: List[DirectChatResponse] = Field(default_factory=list)
    groups: List[GroupChatResponse] = Field(default_factory=list)
