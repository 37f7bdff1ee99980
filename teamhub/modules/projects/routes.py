from fastapi import APIRouter, Depends
from teamhub.database.supabase_client import get_supabase
from teamhub.modules.projects.schemas import (
    ProjectCreate, ProjectUpdate, ProjectResponse, ProjectListResponse
)
from teamhub.modules.projects.service import ProjectService
from supabase import Client
from typing import Optional

router = APIRouter(prefix="/projects", tags=["projects"])


def get_project_service(supabase: Client = Depends(get_supabase)) -> ProjectService:
    return ProjectService(supabase)


@router.get("", response_model=ProjectListResponse)
async def list_projects(
    user_id: Optional[str] = None,
    service: ProjectService = Depends(get_project_service)
):
    """List projects; with user_id only those the user created or is a member of"""
    return ProjectListResponse(projects=service.list_projects(user_id))


@router.post("", response_model=ProjectResponse, status_code=201)
async def create_project(
    project_data: ProjectCreate,
    service: ProjectService = Depends(get_project_service)
):
    """Create a project"""
    return service.create_project(project_data)


@router.get("/{project_id}", response_model=ProjectResponse)
async def get_project(
    project_id: str,
    service: ProjectService = Depends(get_project_service)
):
    """Get project by ID"""
    return service.get_project_by_id(project_id)


@router.put("/{project_id}", response_model=ProjectResponse)
async def update_project(
    project_id: str,
    project_data: ProjectUpdate,
    service: ProjectService = Depends(get_project_service)
):
    """Update any subset of a project's fields"""
    return service.update_project(project_id, project_data)


@router.delete("/{project_id}", status_code=204)
async def delete_project(
    project_id: str,
    service: ProjectService = Depends(get_project_service)
):
    """Delete project and its widget data"""
    service.delete_project(project_id)
    return None
