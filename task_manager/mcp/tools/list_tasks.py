"""
List Tasks MCP Tool

Lists a project's tasks in the order they were added.
"""

from typing import Any, Dict

from task_manager.mcp.base_tool import BaseMCPTool
from task_manager.mcp.server import MCPTool
from task_manager.schemas.tools import ListTasksInput, TaskListOutput


class ListTasksTool(BaseMCPTool):
    """MCP Tool for listing a project's tasks"""

    name = "list-tasks"
    label = "Tasks"
    input_model = ListTasksInput

    async def execute(self, params: ListTasksInput) -> Dict[str, Any]:
        tasks = await self.tasks.list_tasks(params.project_id)
        return TaskListOutput(tasks=tasks).model_dump(by_alias=True, mode="json")


def register_list_tasks_tool(mcp_server, project_service, task_service):
    """Register list-tasks tool with MCP server"""
    tool = MCPTool(
        name=ListTasksTool.name,
        title="List Tasks",
        description="Lists all tasks for a project",
        input_model=ListTasksInput,
        output_model=TaskListOutput,
        handler=ListTasksTool(project_service, task_service).run
    )

    mcp_server.register_tool(tool)
