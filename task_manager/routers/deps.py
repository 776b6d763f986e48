"""Dependencies shared by the routers; everything lives on app.state."""
from fastapi import Request

from task_manager.services.project_service import ProjectService


def get_project_service(request: Request) -> ProjectService:
    return request.app.state.project_service
