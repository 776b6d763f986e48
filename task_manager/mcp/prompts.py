"""Planning prompt built from a project's pending and finished tasks."""
from typing import List

from mcp import types

from task_manager.mcp.server import MCPPrompt
from task_manager.models.project import Project
from task_manager.models.task import Task
from task_manager.schemas.tools import NextStepsInput
from task_manager.services.project_service import ProjectService
from task_manager.services.task_service import TaskService


def build_next_steps_text(project: Project, tasks: List[Task]) -> str:
    pending = "\n".join(f"- {t.title} ({t.id})" for t in tasks if not t.done)
    done = "\n".join(f"- {t.title}" for t in tasks if t.done)
    return (
        f"Help plan next steps for the following project: {project.name}\n\n"
        f"Pending tasks:\n{pending}\n\n"
        f"Done tasks:\n{done}\n\n"
        "Suggest next 3 steps."
    )


def register_next_steps_prompt(mcp_server, project_service: ProjectService, task_service: TaskService):
    """Register the next-steps prompt with MCP server"""
    async def next_steps(params: NextStepsInput) -> types.GetPromptResult:
        project = await project_service.get_project(params.project_id)
        tasks = await task_service.list_tasks(params.project_id)
        return types.GetPromptResult(
            description=f"Next steps for {project.name}",
            messages=[
                types.PromptMessage(
                    role="user",
                    content=types.TextContent(type="text", text=build_next_steps_text(project, tasks)),
                )
            ],
        )

    mcp_server.register_prompt(MCPPrompt(
        name="next-steps",
        title="Plan Next Steps",
        description="Helps the model plan next steps for a project",
        input_model=NextStepsInput,
        handler=next_steps,
    ))
