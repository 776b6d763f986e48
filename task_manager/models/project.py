"""Project record."""
from datetime import datetime
from typing import Dict, Optional
import logging

from pydantic import BaseModel, ConfigDict, field_serializer
from pydantic.alias_generators import to_camel

from task_manager.models.timestamps import format_timestamp, parse_timestamp

logger = logging.getLogger(__name__)


class Project(BaseModel):
    """A project; its id namespaces the project's task list."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    name: str
    created_at: datetime

    @field_serializer("created_at")
    def serialize_created_at(self, value: datetime) -> str:
        return format_timestamp(value)

    @property
    def key(self) -> str:
        return project_key(self.id)

    def to_hash(self) -> Dict[str, str]:
        """Field map as stored under project:<id>."""
        return {
            "id": self.id,
            "name": self.name,
            "createdAt": format_timestamp(self.created_at),
        }

    @classmethod
    def from_hash(cls, data: Dict[str, str]) -> Optional["Project"]:
        """Decode a stored field map; None when the hash is empty or partial."""
        if not data or not data.get("id") or not data.get("createdAt"):
            return None
        try:
            created_at = parse_timestamp(data["createdAt"])
        except ValueError:
            logger.warning(f"Skipping project {data['id']} with unreadable createdAt {data['createdAt']!r}")
            return None
        return cls(id=data["id"], name=data.get("name", ""), created_at=created_at)


PROJECT_INDEX_KEY = "project:index"


def project_key(project_id: str) -> str:
    return f"project:{project_id}"


def project_tasks_key(project_id: str) -> str:
    return f"project:{project_id}:tasks"
