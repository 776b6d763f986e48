"""Project and task management service exposed over MCP, backed by Redis."""

__version__ = "1.0.0"
