from pydantic import BaseModel, Field
from typing import Optional, List, Any
from datetime import datetime


class MessageCreate(BaseModel):
    chat_id: str
    sender_id: str
    sender_name: str
    content: str
    reply_to: Optional[int] = None


class MessageSeed(BaseModel):
    """One entry of a bulk history replacement. Ids are reassigned by the store, so reply_to is not accepted."""
    sender_id: Optional[str] = None
    sender_name: Optional[str] = None
    content: str = ""
    timestamp: Optional[datetime] = None
    reactions: Optional[List[Any]] = None
    is_edited: bool = False


class MessageReplace(BaseModel):
    messages: List[MessageSeed] = Field(default_factory=list)


class ReplyRef(BaseModel):
    id: str


class MessageResponse(BaseModel):
    id: str
    chat_id: str
    user_id: str
    user_name: str
    avatar: str
    content: str
    created_at: datetime
    timestamp: str  # HH:MM in the display timezone
    date: str  # e.g. 2025年1月5日
    is_read: bool = True
    is_bookmarked: bool = False
    reactions: List[Any] = Field(default_factory=list)
    mentions: List[Any] = Field(default_factory=list)
    reply_to: Optional[ReplyRef] = None
    is_edited: bool = False


class MessageListResponse(BaseModel):
    messages: List[MessageResponse]


class MessageReplaceResponse(BaseModel):
    chat_id: str
    deleted: int
    inserted: int
