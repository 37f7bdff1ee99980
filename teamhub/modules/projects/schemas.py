from pydantic import BaseModel, Field, field_validator
from typing import Optional, List, Dict, Any
from datetime import datetime


class ProjectCreate(BaseModel):
    id: Optional[str] = None
    name: str
    icon: Optional[str] = None
    description: Optional[str] = None
    creator_id: Optional[str] = None
    linked_chats: Optional[List[Dict[str, Any]]] = None
    project_members: Optional[List[Dict[str, Any]]] = None
    game_settings: Optional[Dict[str, Any]] = None


class ProjectUpdate(BaseModel):
    name: Optional[str] = None
    icon: Optional[str] = None
    description: Optional[str] = None
    creator_id: Optional[str] = None
    linked_chats: Optional[List[Dict[str, Any]]] = None
    project_members: Optional[List[Dict[str, Any]]] = None
    game_settings: Optional[Dict[str, Any]] = None


class ProjectResponse(BaseModel):
    id: str
    name: str
    icon: Optional[str] = None
    description: str = ""
    creator_id: Optional[str] = None
    linked_chats: List[Dict[str, Any]] = Field(default_factory=list)
    project_members: List[Dict[str, Any]] = Field(default_factory=list)
    game_settings: Optional[Dict[str, Any]] = None
    created_at: Optional[datetime] = None

    @field_validator("linked_chats", "project_members", mode="before")
    @classmethod
    def _collections_default(cls, v):
        return v or []

    @field_validator("description", mode="before")
    @classmethod
    def _description_default(cls, v):
        return v or ""


class ProjectListResponse(BaseModel):
    projects: List[ProjectResponse]
