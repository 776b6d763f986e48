"""Task record."""
from datetime import datetime
from typing import Dict, Optional
import logging

from pydantic import BaseModel, ConfigDict, field_serializer
from pydantic.alias_generators import to_camel

from task_manager.models.timestamps import format_timestamp, parse_timestamp

logger = logging.getLogger(__name__)


class Task(BaseModel):
    """
    A task inside a project.

    In Redis every field is text: `done` is "true"/"false" and an unset
    `completedAt` is the empty string. to_hash/from_hash own that encoding;
    everything above the store works with this typed record.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    project_id: str
    title: str
    done: bool = False
    created_at: datetime
    completed_at: Optional[datetime] = None

    @field_serializer("created_at")
    def serialize_created_at(self, value: datetime) -> str:
        return format_timestamp(value)

    @field_serializer("completed_at")
    def serialize_completed_at(self, value: Optional[datetime]) -> Optional[str]:
        return format_timestamp(value) if value else None

    @property
    def key(self) -> str:
        return task_key(self.id)

    def to_hash(self) -> Dict[str, str]:
        """Field map as stored under task:<id>."""
        return {
            "id": self.id,
            "projectId": self.project_id,
            "title": self.title,
            "done": "true" if self.done else "false",
            "createdAt": format_timestamp(self.created_at),
            "completedAt": format_timestamp(self.completed_at) if self.completed_at else "",
        }

    @classmethod
    def from_hash(cls, data: Dict[str, str]) -> Optional["Task"]:
        """Decode a stored field map; None when the hash is empty or partial."""
        if not data or not data.get("id") or not data.get("createdAt"):
            return None
        completed_at = data.get("completedAt")
        try:
            return cls(
                id=data["id"],
                project_id=data.get("projectId", ""),
                title=data.get("title", ""),
                done=data.get("done") == "true",
                created_at=parse_timestamp(data["createdAt"]),
                completed_at=parse_timestamp(completed_at) if completed_at else None,
            )
        except ValueError:
            # Written by something else; treated like a missing record
            logger.warning(f"Skipping task {data['id']} with unreadable timestamps")
            return None


def task_key(task_id: str) -> str:
    return f"task:{task_id}"
