"""Widget service: fetch, select and build display records."""

import asyncio
import logging
from datetime import date, datetime

import httpx

from task_widget.api.models import DisplayRecord, Task, WidgetSummary
from task_widget.config import WidgetConfig
from task_widget.dates import (
    format_relative_label,
    format_updated_at,
    is_overdue,
    parse_calendar_date,
)
from task_widget.markdown import clean_markdown
from task_widget.remote.task_fetcher import TaskFetcher, TaskWidgetError
from task_widget.selector import select_tasks

logger = logging.getLogger(__name__)

UNTITLED = "Untitled"


def _label(date_str: str | None, today: date) -> tuple[str | None, bool]:
    """Relative label and overdue flag; (None, False) for missing or malformed dates."""
    if not date_str or parse_calendar_date(date_str) is None:
        return None, False
    return format_relative_label(date_str, today), is_overdue(date_str, today)


def build_record(task: Task, today: date) -> DisplayRecord:
    """Convert a selected task into a display record."""
    info = task.task_info
    schedule_label, overdue_scheduled = _label(info.schedule_date, today)
    deadline_label, overdue_deadline = _label(info.deadline_date, today)

    return DisplayRecord(
        title=clean_markdown(task.markdown) or UNTITLED,
        schedule_date=info.schedule_date,
        deadline_date=info.deadline_date,
        schedule_label=schedule_label,
        deadline_label=deadline_label,
        overdue_scheduled=overdue_scheduled,
        overdue_deadline=overdue_deadline,
    )


class TaskWidgetService:
    """Runs the fetch -> select -> format pipeline for one render pass."""

    def __init__(self, fetcher: TaskFetcher, config: WidgetConfig) -> None:
        self._fetcher = fetcher
        self._config = config

    async def get_tasks(self) -> list[Task]:
        """Fetch enabled scopes and return the selected tasks.

        Any fetch or parse failure is logged and yields an empty list,
        so the widget renders its empty state instead of an error.
        """
        scopes = self._config.enabled_scopes()
        if not scopes:
            logger.info("[WidgetService] No scopes enabled")
            return []

        failed = False
        try:
            # A failing scope cancels the remaining fetches before the group exits
            async with asyncio.TaskGroup() as group:
                fetches = [group.create_task(self._fetcher.fetch_tasks(s)) for s in scopes]
        except* (TaskWidgetError, httpx.HTTPError) as eg:
            errors = "; ".join(str(e) for e in eg.exceptions)
            logger.error(f"[WidgetService] Error fetching tasks: {errors}", exc_info=True)
            failed = True
        if failed:
            return []

        # Tasks are read in scope order, so active results precede upcoming ones
        combined: list[Task] = [task for fetch in fetches for task in fetch.result()]
        selected = select_tasks(combined, self._config.max_tasks_to_show)
        logger.info(
            f"[WidgetService] Selected {len(selected)} of {len(combined)} tasks "
            f"from scopes {', '.join(scopes)}"
        )
        return selected

    async def build_summary(self, now: datetime | None = None) -> WidgetSummary:
        """Build the widget summary for a single render pass.

        Args:
            now: Reference time; defaults to the current local time

        Returns:
            Summary with one record per selected task
        """
        tasks = await self.get_tasks()
        if now is None:
            now = datetime.now()
        today = now.date()

        records = [build_record(task, today) for task in tasks]
        return WidgetSummary(
            records=records,
            count=len(records),
            updated_at=format_updated_at(now),
            generated_at=now,
        )
