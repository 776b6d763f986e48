"""
Error taxonomy for the task manager.

Services raise these and let them propagate; the MCP dispatcher turns them
into tool error results or JSON-RPC errors.
"""

from typing import Any, Dict, Optional


class TaskManagerError(Exception):
    """Base exception for task manager errors"""

    code = "INTERNAL_ERROR"

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details
        }


class InvalidInput(TaskManagerError):
    """A required text field is empty or a request failed schema validation"""
    code = "INVALID_INPUT"


class NotFound(TaskManagerError):
    """The referenced project or task does not exist"""
    code = "NOT_FOUND"


class Conflict(TaskManagerError):
    """The stored task belongs to a different project than requested"""
    code = "CONFLICT"


class StoreUnavailable(TaskManagerError):
    """Redis did not answer"""
    code = "STORE_UNAVAILABLE"


class ConfigurationError(RuntimeError):
    """Fatal startup configuration problem"""
