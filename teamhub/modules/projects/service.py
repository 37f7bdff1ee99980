from supabase import Client
from teamhub.modules.projects.schemas import ProjectCreate, ProjectUpdate, ProjectResponse
from teamhub.modules.project_data.service import ProjectDataService
from teamhub.core.exceptions import TeamhubError, ValidationError, NotFoundError, StorageError
from teamhub.core.identity import generate_id
from teamhub.database.aggregates import supplied_fields
from teamhub.database.queries import first_row, merge_rows, where_member
from typing import List, Optional
from datetime import datetime, timezone
import logging

logger = logging.getLogger(__name__)

DEFAULT_PROJECT_ICON = "🎮"


class ProjectService:
    def __init__(self, supabase: Client):
        self.supabase = supabase
        self.project_data = ProjectDataService(supabase)

    def list_projects(self, user_id: Optional[str] = None) -> List[ProjectResponse]:
        """All projects, or those the user created or is a member of"""
        try:
            table = self.supabase.table("projects")
            if not user_id:
                result = table.select("*").order("created_at").execute()
                return [ProjectResponse(**p) for p in result.data]

            created = table.select("*").eq("creator_id", user_id).execute()
            joined = where_member(table.select("*"), "project_members", user_id).execute()
            rows = sorted(
                merge_rows(created.data, joined.data),
                key=lambda r: r.get("created_at") or ""
            )
            return [ProjectResponse(**p) for p in rows]
        except Exception as e:
            logger.exception("Listing projects failed")
            raise StorageError(str(e))

    def create_project(self, project_data: ProjectCreate) -> ProjectResponse:
        """Create a project; an existing project with the same caller-supplied id is replaced"""
        if not project_data.name or not project_data.name.strip():
            raise ValidationError("Project name is required")

        try:
            result = self.supabase.table("projects").upsert({
                "id": project_data.id or generate_id("project"),
                "name": project_data.name,
                "icon": project_data.icon or DEFAULT_PROJECT_ICON,
                "description": project_data.description or "",
                "creator_id": project_data.creator_id,
                "linked_chats": project_data.linked_chats or [],
                "project_members": project_data.project_members or [],
                "game_settings": project_data.game_settings,
                "created_at": datetime.now(timezone.utc).isoformat(),
            }, on_conflict="id").execute()

            if not result.data:
                raise StorageError("Failed to create project")

            logger.info("Created project %s", result.data[0]["id"])
            return ProjectResponse(**result.data[0])
        except TeamhubError:
            raise
        except Exception as e:
            logger.exception("Creating project failed")
            raise StorageError(str(e))

    def get_project_by_id(self, project_id: str) -> ProjectResponse:
        """Get project by ID"""
        try:
            result = self.supabase.table("projects").select("*").eq("id", project_id).limit(1).execute()
            row = first_row(result)
            if row is None:
                raise NotFoundError("Project not found")
            return ProjectResponse(**row)
        except TeamhubError:
            raise
        except Exception as e:
            raise StorageError(str(e))

    def update_project(self, project_id: str, project_data: ProjectUpdate) -> ProjectResponse:
        """Replace the supplied fields of an existing project"""
        if not project_id:
            raise ValidationError("Project ID is required")

        update_data = supplied_fields(project_data)
        if "name" in update_data and not update_data["name"].strip():
            raise ValidationError("Project name cannot be empty")
        if not update_data:
            return self.get_project_by_id(project_id)

        try:
            result = self.supabase.table("projects")\
                .update(update_data)\
                .eq("id", project_id)\
                .execute()

            if not result.data:
                raise NotFoundError("Project not found")

            return ProjectResponse(**result.data[0])
        except TeamhubError:
            raise
        except Exception as e:
            logger.exception("Updating project %s failed", project_id)
            raise StorageError(str(e))

    def delete_project(self, project_id: str) -> bool:
        """
        Delete a project together with its widget data.

        The widget data goes first, so a failed call leaves the project in
        place and a retry finishes the job. Stale data of an id without a
        project row is removed as well before reporting NotFoundError.
        """
        if not project_id:
            raise ValidationError("Project ID is required")
        try:
            self.project_data.delete_project_data(project_id)

            result = self.supabase.table("projects")\
                .delete()\
                .eq("id", project_id)\
                .execute()

            if not result.data:
                raise NotFoundError("Project not found")

            logger.info("Deleted project %s", project_id)
            return True
        except TeamhubError:
            raise
        except Exception as e:
            logger.exception("Deleting project %s failed", project_id)
            raise StorageError(str(e))
