from task_manager.services.project_service import ProjectService
from task_manager.services.task_service import TaskService

__all__ = ["ProjectService", "TaskService"]
