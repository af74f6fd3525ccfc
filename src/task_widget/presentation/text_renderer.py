"""Plain-text presentation of the task widget."""

import textwrap
from typing import Protocol

from task_widget.api.models import DisplayRecord, WidgetSummary

EMPTY_STATE = "No upcoming tasks"


class PresentationAdapter(Protocol):
    """Protocol for rendering a widget summary."""

    def render(self, summary: WidgetSummary) -> str:
        """Render the summary into its output form."""
        ...


class TextRenderer:
    """Renders the widget as a fixed-width block of text."""

    def __init__(self, width: int = 44, line_limit: int = 2) -> None:
        """Initialize renderer.

        Args:
            width: Total line width of the widget
            line_limit: Maximum lines used for a task title
        """
        self._width = width
        self._line_limit = line_limit

    def render(self, summary: WidgetSummary) -> str:
        """Render header, task cards and footer."""
        count = str(summary.count)
        lines = [f"Tasks{count.rjust(self._width - len('Tasks'))}", ""]

        if not summary.records:
            lines.append(EMPTY_STATE.center(self._width).rstrip())
        else:
            for index, record in enumerate(summary.records):
                if index > 0:
                    lines.append("")
                lines.extend(self._render_card(record))

        lines.append("")
        lines.append(f"Updated {summary.updated_at}".center(self._width).rstrip())
        return "\n".join(lines)

    def _render_card(self, record: DisplayRecord) -> list[str]:
        title_lines = textwrap.wrap(
            record.title,
            width=self._width - 4,
            max_lines=self._line_limit,
            placeholder="...",
        ) or [record.title]
        lines = [f"[ ] {title_lines[0]}"]
        lines.extend(f"    {line}" for line in title_lines[1:])

        dates: list[str] = []
        if record.schedule_label:
            dates.append(_date_text("Scheduled", record.schedule_label, record.overdue_scheduled))
        if record.deadline_label:
            dates.append(_date_text("Due", record.deadline_label, record.overdue_deadline))
        if dates:
            lines.append("    " + "  ".join(dates))
        return lines


def _date_text(prefix: str, label: str, overdue: bool) -> str:
    # Trailing "!" stands in for the red overdue color
    return f"{prefix}: {label}{'!' if overdue else ''}"
