"""
Create Project MCP Tool

Creates a project whose id is derived from its name.
"""

from typing import Any, Dict

from task_manager.mcp.base_tool import BaseMCPTool
from task_manager.mcp.server import MCPTool
from task_manager.schemas.tools import CreateProjectInput, ProjectOutput


class CreateProjectTool(BaseMCPTool):
    """MCP Tool for creating projects"""

    name = "create-project"
    label = "Project created"
    input_model = CreateProjectInput

    async def execute(self, params: CreateProjectInput) -> Dict[str, Any]:
        project = await self.projects.create_project(params.name)
        return ProjectOutput(project=project).model_dump(by_alias=True, mode="json")


def register_create_project_tool(mcp_server, project_service, task_service):
    """Register create-project tool with MCP server"""
    tool = MCPTool(
        name=CreateProjectTool.name,
        title="Create Project",
        description="Creates a new project",
        input_model=CreateProjectInput,
        output_model=ProjectOutput,
        handler=CreateProjectTool(project_service, task_service).run
    )

    mcp_server.register_tool(tool)
