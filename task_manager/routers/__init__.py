"""Routers package for the task manager HTTP transport."""

from .mcp import MCPEndpoint, create_session_manager
from .projects import router as projects_router

__all__ = ["MCPEndpoint", "create_session_manager", "projects_router"]
