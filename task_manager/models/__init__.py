from task_manager.models.project import Project
from task_manager.models.task import Task

__all__ = ["Project", "Task"]
