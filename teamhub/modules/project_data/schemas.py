from pydantic import BaseModel, Field, field_validator
from typing import Optional, List, Dict, Any
from datetime import datetime

DEFAULT_WIDGET_ORDER = ["taskSummary", "gantt", "calendar", "todo", "spreadsheet", "url", "memo"]
DEFAULT_HOLIDAY_SETTINGS = {"excludeSaturday": True, "excludeSunday": True, "excludeHolidays": True}

COLLECTION_FIELDS = (
    "gantt_tasks",
    "task_groups",
    "milestones",
    "todo_items",
    "spreadsheet_links",
    "memo_entries",
    "url_links",
    "custom_events",
)


class ProjectDataUpdate(BaseModel):
    """Any subset of the widget collections. Omitted fields keep their stored value."""
    gantt_tasks: Optional[List[Any]] = None
    task_groups: Optional[List[Any]] = None
    milestones: Optional[List[Any]] = None
    todo_items: Optional[List[Any]] = None
    spreadsheet_links: Optional[List[Any]] = None
    memo_entries: Optional[List[Any]] = None
    url_links: Optional[List[Any]] = None
    custom_events: Optional[List[Any]] = None
    widget_order: Optional[List[str]] = None
    holiday_settings: Optional[Dict[str, Any]] = None


class ProjectDataResponse(BaseModel):
    project_id: str
    gantt_tasks: List[Any] = Field(default_factory=list)
    task_groups: List[Any] = Field(default_factory=list)
    milestones: List[Any] = Field(default_factory=list)
    todo_items: List[Any] = Field(default_factory=list)
    spreadsheet_links: List[Any] = Field(default_factory=list)
    memo_entries: List[Any] = Field(default_factory=list)
    url_links: List[Any] = Field(default_factory=list)
    custom_events: List[Any] = Field(default_factory=list)
    widget_order: List[str] = Field(default_factory=lambda: list(DEFAULT_WIDGET_ORDER))
    holiday_settings: Dict[str, Any] = Field(default_factory=lambda: dict(DEFAULT_HOLIDAY_SETTINGS))
    updated_at: Optional[datetime] = None

    @field_validator(*COLLECTION_FIELDS, mode="before")
    @classmethod
    def _collections_default(cls, v):
        return v or []

    @field_validator("widget_order", mode="before")
    @classmethod
    def _widget_order_default(cls, v):
        return v if v is not None else list(DEFAULT_WIDGET_ORDER)

    @field_validator("holiday_settings", mode="before")
    @classmethod
    def _holiday_settings_default(cls, v):
        return v if v is not None else dict(DEFAULT_HOLIDAY_SETTINGS)
