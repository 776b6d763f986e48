"""Project tasks resource: tasks://{projectId}"""
from typing import List

from mcp.server.lowlevel.helper_types import ReadResourceContents

from task_manager.errors import InvalidInput
from task_manager.mcp.server import MCPResourceTemplate
from task_manager.services.task_service import TaskService


def project_id_from_uri(uri: str) -> str:
    """tasks://alpha and tasks://alpha/ both name project alpha."""
    project_id = uri.split("://", 1)[1].rstrip("/") if "://" in uri else ""
    if not project_id:
        raise InvalidInput("Resource URI has no project id", {"uri": uri})
    return project_id


def register_project_tasks_resource(mcp_server, task_service: TaskService):
    """Register the tasks://{projectId} resource template with MCP server"""

    async def read_project_tasks(uri: str) -> List[ReadResourceContents]:
        tasks = await task_service.list_tasks(project_id_from_uri(uri))
        return [
            ReadResourceContents(
                content=f"Task: {task.title} - {'Done' if task.done else 'Not Done'}",
                mime_type="text/plain",
            )
            for task in tasks
        ]

    mcp_server.register_resource_template(MCPResourceTemplate(
        name="project-tasks",
        title="Tasks",
        description="Tasks of a project, one entry per task",
        uri_template="tasks://{projectId}",
        handler=read_project_tasks,
    ))
