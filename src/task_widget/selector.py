"""Task selection: filter, sort and truncate."""

import logging
from collections.abc import Iterable
from datetime import date

from task_widget.api.models import Task
from task_widget.dates import parse_calendar_date

logger = logging.getLogger(__name__)

# Exact, case-sensitive match
TERMINAL_STATES = frozenset({"done", "canceled", "cancelled"})


def is_eligible(task: Task) -> bool:
    """Task has a schedule or deadline date and is not in a terminal state."""
    info = task.task_info
    has_date = bool(info.schedule_date or info.deadline_date)
    return has_date and info.state not in TERMINAL_STATES


def _sort_key(task: Task) -> tuple[bool, date]:
    """Sort by effective calendar date; unparseable dates go last."""
    parsed = parse_calendar_date(task.effective_date)
    if parsed is None:
        logger.warning(
            f"[Selector] Task {task.id!r} has malformed date {task.effective_date!r}, sorting last"
        )
        return (True, date.max)
    return (False, parsed)


def select_tasks(tasks: Iterable[Task], limit: int) -> list[Task]:
    """Reduce merged tasks to at most `limit` eligible ones ordered by urgency.

    The sort is stable, so tasks on the same day keep their input order.

    Raises:
        ValueError: If limit is negative
    """
    if limit < 0:
        raise ValueError(f"limit must be >= 0, got {limit}")

    eligible = [t for t in tasks if is_eligible(t)]
    eligible.sort(key=_sort_key)
    return eligible[:limit]
