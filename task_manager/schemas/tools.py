"""Input and output schemas for the MCP tools and prompts."""
from typing import List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from task_manager.models.project import Project
from task_manager.models.task import Task


class ToolInput(BaseModel):
    """Base for tool arguments; camelCase on the wire."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class EmptyInput(ToolInput):
    """Schema for tools without arguments."""


class CreateProjectInput(ToolInput):
    name: str = Field(..., min_length=1)


class AddTaskInput(ToolInput):
    project_id: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1)


class ListTasksInput(ToolInput):
    project_id: str = Field(..., min_length=1)


class CompleteTaskInput(ToolInput):
    project_id: str = Field(..., min_length=1)
    task_id: str = Field(..., min_length=1)


class NextStepsInput(ToolInput):
    project_id: str = Field(..., min_length=1)


class ProjectOutput(BaseModel):
    project: Project


class ProjectListOutput(BaseModel):
    projects: List[Project]


class TaskOutput(BaseModel):
    task: Task


class TaskListOutput(BaseModel):
    tasks: List[Task]
