from pydantic import BaseModel, Field
from typing import Optional, List


class EventSuggestRequest(BaseModel):
    tags: List[str] = Field(default_factory=list)  # genre tags, e.g. indie, rpg, vr
    year: Optional[int] = None


class EventSuggestion(BaseModel):
    name: str
    start_date: str = ""  # YYYY-MM-DD
    end_date: str = ""
    location: str = ""
    url: str = ""
    type: str = ""  # exhibition, conference, market, online
    description: str = ""


class EventSuggestResponse(BaseModel):
    events: List[EventSuggestion]
