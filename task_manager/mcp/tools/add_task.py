"""
Add Task MCP Tool

Appends a task to a project. The task id is derived from the title and is
shared across projects, so equal titles in two projects hit the same record.
"""

from typing import Any, Dict

from task_manager.mcp.base_tool import BaseMCPTool
from task_manager.mcp.server import MCPTool
from task_manager.schemas.tools import AddTaskInput, TaskOutput


class AddTaskTool(BaseMCPTool):
    """MCP Tool for adding tasks"""

    name = "add-task"
    label = "Task added"
    input_model = AddTaskInput

    async def execute(self, params: AddTaskInput) -> Dict[str, Any]:
        task = await self.tasks.add_task(params.project_id, params.title)
        return TaskOutput(task=task).model_dump(by_alias=True, mode="json")


def register_add_task_tool(mcp_server, project_service, task_service):
    """Register add-task tool with MCP server"""
    tool = MCPTool(
        name=AddTaskTool.name,
        title="Add Task",
        description="Adds a new task to a project",
        input_model=AddTaskInput,
        output_model=TaskOutput,
        handler=AddTaskTool(project_service, task_service).run
    )

    mcp_server.register_tool(tool)
