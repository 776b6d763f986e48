"""Builds the MCP server with every tool, resource and prompt registered."""
from task_manager.mcp.prompts import register_next_steps_prompt
from task_manager.mcp.resources import register_project_tasks_resource
from task_manager.mcp.server import MCPServer
from task_manager.mcp.tools.add_task import register_add_task_tool
from task_manager.mcp.tools.complete_task import register_complete_task_tool
from task_manager.mcp.tools.create_project import register_create_project_tool
from task_manager.mcp.tools.list_projects import register_list_projects_tool
from task_manager.mcp.tools.list_tasks import register_list_tasks_tool
from task_manager.services.project_service import ProjectService
from task_manager.services.task_service import TaskService

INSTRUCTIONS = (
    "Project and task management MCP server, use it to create projects, add tasks, "
    "list tasks, complete tasks, and plan next steps."
)


def build_mcp_server(project_service: ProjectService, task_service: TaskService) -> MCPServer:
    mcp_server = MCPServer(name="task-manager", instructions=INSTRUCTIONS)

    register_create_project_tool(mcp_server, project_service, task_service)
    register_list_projects_tool(mcp_server, project_service, task_service)
    register_add_task_tool(mcp_server, project_service, task_service)
    register_list_tasks_tool(mcp_server, project_service, task_service)
    register_complete_task_tool(mcp_server, project_service, task_service)
    register_project_tasks_resource(mcp_server, task_service)
    register_next_steps_prompt(mcp_server, project_service, task_service)

    return mcp_server
