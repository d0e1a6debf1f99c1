from dataclasses import dataclass
from datetime import date
from typing import Any, ClassVar, Dict, Optional

from pydantic import BaseModel, ConfigDict, StrictBool, StrictStr, field_validator


class TaskPayload(BaseModel):
    """Client-supplied task fields. Unknown keys, ``id`` included, are dropped."""

    model_config = ConfigDict(extra="ignore")

    title: StrictStr
    description: Optional[StrictStr] = None
    dueDate: Optional[date] = None
    completed: StrictBool = False

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, value):
        if not value.strip():
            raise ValueError("title must be a non-empty string")
        return value

    @field_validator("dueDate", mode="before")
    @classmethod
    def due_date_format(cls, value):
        if value is None or isinstance(value, date):
            return value
        if not isinstance(value, str):
            raise ValueError("dueDate must be a date string formatted as YYYY-MM-DD")
        if not value.strip():
            return None
        try:
            return date.fromisoformat(value.strip())
        except ValueError:
            raise ValueError(f"'{value}' is not a valid YYYY-MM-DD date")


@dataclass
class Task:
    FIELD_NAMES: ClassVar[tuple] = ("title", "description", "dueDate", "completed")

    id: Optional[int] = None
    title: Optional[str] = None
    description: Optional[str] = None
    due_date: Optional[date] = None
    completed: bool = False

    def as_dict(self) -> Dict[str, Any]:
        # The due date is the only field whose wire name differs.
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "dueDate": self.due_date.isoformat() if self.due_date else None,
            "completed": self.completed,
        }

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "Task":
        """Build an unsaved task; raises pydantic's ``ValidationError``."""
        fields = TaskPayload.model_validate(payload)
        return cls(
            title=fields.title,
            description=fields.description,
            due_date=fields.dueDate,
            completed=fields.completed,
        )
