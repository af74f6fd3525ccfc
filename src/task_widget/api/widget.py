"""Widget API endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends

from task_widget.api.models import (
    DisplayRecord,
    DisplayRecordResponse,
    Task,
    TaskResponse,
    WidgetResponse,
)
from task_widget.factory import get_widget_service
from task_widget.widget_service import TaskWidgetService

logger = logging.getLogger(__name__)

router = APIRouter()

WidgetService = Annotated[TaskWidgetService, Depends(get_widget_service)]


@router.get("/widget", response_model=WidgetResponse)
async def get_widget(service: WidgetService) -> WidgetResponse:
    """Render the widget as JSON.

    Upstream failures produce an empty widget, never an error response.

    Returns:
        Display records, task count and last-updated time
    """
    summary = await service.build_summary()
    logger.debug(f"[WidgetAPI] Rendered {summary.count} records")
    return WidgetResponse(
        count=summary.count,
        updated_at=summary.updated_at,
        generated_at=summary.generated_at,
        records=[_record_to_response(record) for record in summary.records],
    )


@router.get("/tasks", response_model=list[TaskResponse])
async def list_selected_tasks(service: WidgetService) -> list[TaskResponse]:
    """List the selected tasks in display order.

    Returns:
        Raw tasks after filtering, sorting and truncation
    """
    tasks = await service.get_tasks()
    return [_task_to_response(task) for task in tasks]


@router.get("/health")
async def health() -> dict[str, str]:
    """Liveness check."""
    return {"status": "ok"}


def _record_to_response(record: DisplayRecord) -> DisplayRecordResponse:
    """Convert DisplayRecord to DisplayRecordResponse."""
    return DisplayRecordResponse(
        title=record.title,
        schedule_date=record.schedule_date,
        deadline_date=record.deadline_date,
        schedule_label=record.schedule_label,
        deadline_label=record.deadline_label,
        overdue_scheduled=record.overdue_scheduled,
        overdue_deadline=record.overdue_deadline,
    )


def _task_to_response(task: Task) -> TaskResponse:
    """Convert Task to TaskResponse."""
    return TaskResponse(
        id=task.id,
        markdown=task.markdown,
        schedule_date=task.task_info.schedule_date,
        deadline_date=task.task_info.deadline_date,
        state=task.task_info.state,
    )
