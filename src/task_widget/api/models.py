"""API models for TaskWidget."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from pydantic import BaseModel


def _optional_str(value: Any) -> str | None:
    """Return value if it is a non-empty string, else None."""
    if isinstance(value, str) and value:
        return value
    return None


@dataclass(frozen=True)
class TaskInfo:
    """Scheduling block of a remote task."""

    schedule_date: str | None = None  # YYYY-MM-DD, when the task is planned
    deadline_date: str | None = None  # YYYY-MM-DD, hard due date
    state: str | None = None  # done, canceled, cancelled, active, ...

    @classmethod
    def from_dict(cls, data: Any) -> "TaskInfo":
        """Build from the raw `taskInfo` object (anything else yields an empty block)."""
        if not isinstance(data, dict):
            return cls()
        state = data.get("state")
        return cls(
            schedule_date=_optional_str(data.get("scheduleDate")),
            deadline_date=_optional_str(data.get("deadlineDate")),
            state=state if isinstance(state, str) else None,
        )


@dataclass(frozen=True)
class Task:
    """Task item returned by the remote tasks API."""

    id: str | None
    markdown: str
    task_info: TaskInfo = field(default_factory=TaskInfo)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Task":
        """Build from one entry of the `items` array."""
        raw_id = data.get("id")
        markdown = data.get("markdown")
        return cls(
            id=None if raw_id is None else str(raw_id),
            markdown=markdown if isinstance(markdown, str) else "",
            task_info=TaskInfo.from_dict(data.get("taskInfo")),
        )

    @property
    def effective_date(self) -> str | None:
        """Schedule date if present, otherwise deadline date."""
        return self.task_info.schedule_date or self.task_info.deadline_date


@dataclass(frozen=True)
class DisplayRecord:
    """Display-ready view of one selected task."""

    title: str
    schedule_date: str | None = None
    deadline_date: str | None = None
    schedule_label: str | None = None  # e.g. "Today", "3d", "6/25"
    deadline_label: str | None = None
    overdue_scheduled: bool = False
    overdue_deadline: bool = False


@dataclass(frozen=True)
class WidgetSummary:
    """Everything a presentation adapter needs for one render pass."""

    records: list[DisplayRecord]
    count: int
    updated_at: str  # h:mm AM/PM
    generated_at: datetime


class TaskResponse(BaseModel):
    """API response model for selected tasks."""

    id: str | None
    markdown: str
    schedule_date: str | None
    deadline_date: str | None
    state: str | None


class DisplayRecordResponse(BaseModel):
    """API response model for one widget row."""

    title: str
    schedule_date: str | None
    deadline_date: str | None
    schedule_label: str | None
    deadline_label: str | None
    overdue_scheduled: bool
    overdue_deadline: bool


class WidgetResponse(BaseModel):
    """API response model for the rendered widget."""

    count: int
    updated_at: str
    generated_at: datetime
    records: list[DisplayRecordResponse]
