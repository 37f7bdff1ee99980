from fastapi import APIRouter, Depends
from teamhub.database.supabase_client import get_supabase
from teamhub.modules.attendance.schemas import (
    AttendanceUpsert, AttendanceResponse, AttendanceListResponse
)
from teamhub.modules.attendance.service import AttendanceService
from supabase import Client
from typing import Optional
from datetime import date

router = APIRouter(prefix="/attendance", tags=["attendance"])


def get_attendance_service(supabase: Client = Depends(get_supabase)) -> AttendanceService:
    return AttendanceService(supabase)


@router.get("", response_model=AttendanceListResponse)
async def list_attendance(
    user_id: Optional[str] = None,
    date_from: Optional[date] = None,
    date_to: Optional[date] = None,
    service: AttendanceService = Depends(get_attendance_service)
):
    """List a user's attendance records"""
    return AttendanceListResponse(records=service.list_records(user_id, date_from, date_to))


@router.put("", response_model=AttendanceResponse)
async def upsert_attendance(
    record: AttendanceUpsert,
    service: AttendanceService = Depends(get_attendance_service)
):
    """Clock in/out or edit the record of one day"""
    return service.upsert_record(record)
