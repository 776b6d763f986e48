"""
Complete Task MCP Tool

Marks a task done. Completing it again succeeds and refreshes completedAt.
"""

from typing import Any, Dict

from task_manager.mcp.base_tool import BaseMCPTool
from task_manager.mcp.server import MCPTool
from task_manager.schemas.tools import CompleteTaskInput, TaskOutput


class CompleteTaskTool(BaseMCPTool):
    """MCP Tool for completing tasks"""

    name = "complete-task"
    label = "Task completed"
    input_model = CompleteTaskInput

    async def execute(self, params: CompleteTaskInput) -> Dict[str, Any]:
        task = await self.tasks.complete_task(params.project_id, params.task_id)
        return TaskOutput(task=task).model_dump(by_alias=True, mode="json")


def register_complete_task_tool(mcp_server, project_service, task_service):
    """Register complete-task tool with MCP server"""
    tool = MCPTool(
        name=CompleteTaskTool.name,
        title="Complete Task",
        description="Completes a task",
        input_model=CompleteTaskInput,
        output_model=TaskOutput,
        handler=CompleteTaskTool(project_service, task_service).run
    )

    mcp_server.register_tool(tool)
