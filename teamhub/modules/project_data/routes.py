from fastapi import APIRouter, Depends
from teamhub.database.supabase_client import get_supabase
from teamhub.modules.project_data.schemas import ProjectDataUpdate, ProjectDataResponse
from teamhub.modules.project_data.service import ProjectDataService
from supabase import Client

router = APIRouter(prefix="/project-data", tags=["project-data"])


def get_project_data_service(supabase: Client = Depends(get_supabase)) -> ProjectDataService:
    return ProjectDataService(supabase)


@router.get("/{project_id}", response_model=ProjectDataResponse)
async def get_project_data(
    project_id: str,
    service: ProjectDataService = Depends(get_project_data_service)
):
    """Get a project's widget data (defaults when nothing was saved yet)"""
    return service.get_project_data(project_id)


@router.put("/{project_id}", response_model=ProjectDataResponse)
async def save_project_data(
    project_id: str,
    data: ProjectDataUpdate,
    service: ProjectDataService = Depends(get_project_data_service)
):
    """Save any subset of a project's widget data"""
    return service.save_project_data(project_id, data)
