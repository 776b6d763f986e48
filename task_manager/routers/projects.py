"""Plain HTTP view of the projects, outside MCP."""
from typing import Any, Dict

from fastapi import APIRouter, Depends

from task_manager.routers.deps import get_project_service
from task_manager.services.project_service import ProjectService

router = APIRouter(tags=["Projects"])


@router.get("/projects")
async def list_projects(service: ProjectService = Depends(get_project_service)) -> Dict[str, Any]:
    """List all projects."""
    projects = await service.list_projects()
    return {"projects": [project.model_dump(by_alias=True, mode="json") for project in projects]}
