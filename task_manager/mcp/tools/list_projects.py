"""
List Projects MCP Tool
"""

from typing import Any, Dict

from task_manager.mcp.base_tool import BaseMCPTool
from task_manager.mcp.server import MCPTool
from task_manager.schemas.tools import EmptyInput, ProjectListOutput


class ListProjectsTool(BaseMCPTool):
    """MCP Tool for listing every project"""

    name = "list-projects"
    label = "Projects"
    input_model = EmptyInput

    async def execute(self, params: EmptyInput) -> Dict[str, Any]:
        projects = await self.projects.list_projects()
        return ProjectListOutput(projects=projects).model_dump(by_alias=True, mode="json")


def register_list_projects_tool(mcp_server, project_service, task_service):
    """Register list-projects tool with MCP server"""
    tool = MCPTool(
        name=ListProjectsTool.name,
        title="List Projects",
        description="Lists all projects",
        input_model=EmptyInput,
        output_model=ProjectListOutput,
        handler=ListProjectsTool(project_service, task_service).run
    )

    mcp_server.register_tool(tool)
