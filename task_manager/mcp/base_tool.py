"""
MCP Base Tool Interface

Provides base functionality for all MCP tools including:
- Argument validation against the tool's input schema
- Error handling
- Logging
"""

from typing import Any, Dict, List, Type
from abc import ABC, abstractmethod
import json
import logging

from mcp import types
from pydantic import BaseModel, ValidationError

from task_manager.errors import InvalidInput, TaskManagerError
from task_manager.services.project_service import ProjectService
from task_manager.services.task_service import TaskService

logger = logging.getLogger(__name__)


class BaseMCPTool(ABC):
    """
    Base class for all MCP tools

    Subclasses set `name`, `label` and `input_model`, and implement execute().
    """

    name: str = ""
    # Prefix of the human-readable text content, e.g. "Task added"
    label: str = ""
    input_model: Type[BaseModel] = BaseModel

    def __init__(self, project_service: ProjectService, task_service: TaskService):
        self.projects = project_service
        self.tasks = task_service

    def validate_arguments(self, arguments: Dict[str, Any]) -> BaseModel:
        """
        Validate raw tool arguments

        Raises:
            InvalidInput: If the arguments do not match the input schema
        """
        try:
            return self.input_model.model_validate(arguments)
        except ValidationError as e:
            logger.error(f"MCP tool {self.name} called with invalid arguments")
            raise InvalidInput(
                f"Invalid arguments for {self.name}",
                {"errors": validation_errors(e)}
            )

    def log_tool_invocation(self, params: Dict[str, Any]) -> None:
        """Log MCP tool invocation for audit trail"""
        logger.info(
            f"MCP Tool Invocation: {self.name} | Params: {params}",
            extra={"tool": self.name},
        )

    async def run(self, arguments: Dict[str, Any]) -> types.CallToolResult:
        params = self.validate_arguments(arguments)
        self.log_tool_invocation(params.model_dump(by_alias=True))
        data = await self.execute(params)
        return create_success_response(self.label, data)

    @abstractmethod
    async def execute(self, params: BaseModel) -> Dict[str, Any]:
        """
        Execute the tool logic

        Must be implemented by subclasses

        Returns:
            Structured content of the tool result
        """
        pass


def validation_errors(error: ValidationError) -> List[Dict[str, Any]]:
    return [
        {"field": ".".join(str(part) for part in item["loc"]), "message": item["msg"]}
        for item in error.errors()
    ]


def create_error_response(error: TaskManagerError) -> types.CallToolResult:
    """
    Create a standardized tool error result

    Args:
        error: The TaskManagerError to convert

    Returns:
        MCP tool result flagged with isError
    """
    return types.CallToolResult(
        isError=True,
        content=[types.TextContent(type="text", text=f"Error ({error.code}): {error.message}")],
        structuredContent={"error": error.to_dict()},
    )


def create_success_response(label: str, data: Dict[str, Any]) -> types.CallToolResult:
    """
    Create a standardized tool success result

    Args:
        label: Prefix for the text content
        data: JSON-ready structured content

    Returns:
        MCP tool result with text and structured content
    """
    payload = next(iter(data.values())) if len(data) == 1 else data
    return types.CallToolResult(
        content=[types.TextContent(type="text", text=f"{label}: {json.dumps(payload)}")],
        structuredContent=data,
    )
