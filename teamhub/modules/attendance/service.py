from supabase import Client
from teamhub.modules.attendance.schemas import AttendanceUpsert, AttendanceResponse
from teamhub.core.exceptions import TeamhubError, ValidationError, StorageError
from teamhub.database.aggregates import supplied_fields, upsert_partial
from typing import List, Optional
from datetime import date
import logging

logger = logging.getLogger(__name__)


class AttendanceService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def list_records(
        self,
        user_id: str,
        date_from: Optional[date] = None,
        date_to: Optional[date] = None
    ) -> List[AttendanceResponse]:
        """Attendance records of a user, oldest day first, optionally within [date_from, date_to]"""
        if not user_id:
            raise ValidationError("user_id is required")
        try:
            query = self.supabase.table("attendance").select("*").eq("user_id", user_id)
            if date_from:
                query = query.gte("date", date_from.isoformat())
            if date_to:
                query = query.lte("date", date_to.isoformat())
            result = query.order("date").execute()
            return [AttendanceResponse(**r) for r in result.data]
        except Exception as e:
            raise StorageError(str(e))

    def upsert_record(self, record: AttendanceUpsert) -> AttendanceResponse:
        """Create or update the record of (user_id, date); omitted fields keep their value"""
        if not record.user_id:
            raise ValidationError("user_id is required")
        try:
            fields = supplied_fields(record, exclude=("user_id", "date"))
            row = upsert_partial(
                self.supabase,
                "attendance",
                {"user_id": record.user_id, "date": record.date.isoformat()},
                fields,
            )
            if row is None:
                raise StorageError("Failed to save attendance")
            return AttendanceResponse(**row)
        except TeamhubError:
            raise
        except Exception as e:
            logger.exception("Saving attendance of %s on %s failed", record.user_id, record.date)
            raise StorageError(str(e))
