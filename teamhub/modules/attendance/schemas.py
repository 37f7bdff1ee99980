from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import date, datetime


class AttendanceUpsert(BaseModel):
    user_id: str
    date: date
    clock_in: Optional[datetime] = None
    clock_out: Optional[datetime] = None
    break_minutes: Optional[int] = Field(None, ge=0)
    status: Optional[str] = None


class AttendanceResponse(BaseModel):
    id: int
    user_id: str
    date: date
    clock_in: Optional[datetime] = None
    clock_out: Optional[datetime] = None
    break_minutes: int = 0
    status: Optional[str] = None


class AttendanceListResponse(BaseModel):
    records: List[AttendanceResponse]
