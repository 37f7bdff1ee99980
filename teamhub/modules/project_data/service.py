from supabase import Client
from teamhub.modules.project_data.schemas import ProjectDataUpdate, ProjectDataResponse
from teamhub.core.exceptions import TeamhubError, ValidationError, StorageError
from teamhub.database.aggregates import supplied_fields, upsert_partial
from teamhub.database.queries import first_row
from datetime import datetime, timezone
import logging

logger = logging.getLogger(__name__)


class ProjectDataService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def get_project_data(self, project_id: str) -> ProjectDataResponse:
        """Stored widget data, or the default (empty) aggregate without creating a row"""
        if not project_id:
            raise ValidationError("project_id is required")
        try:
            result = self.supabase.table("project_data")\
                .select("*")\
                .eq("project_id", project_id)\
                .limit(1)\
                .execute()
            row = first_row(result)
            if row is None:
                return ProjectDataResponse(project_id=project_id)
            return ProjectDataResponse(**row)
        except Exception as e:
            logger.exception("Reading project data of %s failed", project_id)
            raise StorageError(str(e))

    def save_project_data(self, project_id: str, data: ProjectDataUpdate) -> ProjectDataResponse:
        """Replace the supplied widget fields, keep the rest; creates the row when missing"""
        if not project_id:
            raise ValidationError("project_id is required")
        try:
            fields = supplied_fields(data)
            fields["updated_at"] = datetime.now(timezone.utc).isoformat()
            row = upsert_partial(self.supabase, "project_data", {"project_id": project_id}, fields)
            if row is None:
                raise StorageError("Failed to save project data")
            logger.info("Saved project data of %s (%s)", project_id, ", ".join(sorted(fields)))
            return ProjectDataResponse(**row)
        except TeamhubError:
            raise
        except Exception as e:
            logger.exception("Saving project data of %s failed", project_id)
            raise StorageError(str(e))

    def delete_project_data(self, project_id: str) -> bool:
        result = self.supabase.table("project_data")\
            .delete()\
            .eq("project_id", project_id)\
            .execute()
        return len(result.data or []) > 0
