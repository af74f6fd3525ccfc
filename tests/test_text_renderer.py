"""Tests for TextRenderer."""

from datetime import datetime

from task_widget.api.models import DisplayRecord, WidgetSummary
from task_widget.presentation.text_renderer import EMPTY_STATE, TextRenderer


def _summary(records: list[DisplayRecord]) -> WidgetSummary:
    return WidgetSummary(
        records=records,
        count=len(records),
        updated_at="9:05 AM",
        generated_at=datetime(2024, 6, 10, 9, 5),
    )


def test_render_empty_state() -> None:
    """Test header, empty message and footer with no tasks."""
    output = TextRenderer(width=30).render(_summary([]))
    lines = output.splitlines()

    assert lines[0] == "Tasks" + "0".rjust(25)
    assert EMPTY_STATE in output
    assert lines[-1].strip() == "Updated 9:05 AM"


def test_render_cards() -> None:
    """Test each record renders a checkbox line and date line."""
    records = [
        DisplayRecord(
            title="Pay rent",
            deadline_date="2024-06-08",
            deadline_label="2d overdue",
            overdue_deadline=True,
        ),
        DisplayRecord(
            title="Write report",
            schedule_date="2024-06-12",
            deadline_date="2024-06-25",
            schedule_label="2d",
            deadline_label="6/25",
        ),
        DisplayRecord(title="No dates"),
    ]

    output = TextRenderer(width=40).render(_summary(records))

    lines = output.splitlines()
    assert lines[0].endswith("3")
    assert "[ ] Pay rent\n    Due: 2d overdue!\n\n" in output
    assert "[ ] Write report\n    Scheduled: 2d  Due: 6/25\n\n" in output
    assert lines[-3:-1] == ["[ ] No dates", ""]
    assert EMPTY_STATE not in output


def test_render_wraps_long_titles_to_two_lines() -> None:
    """Test titles are wrapped and cut at the line limit."""
    title = "word " * 30
    output = TextRenderer(width=24, line_limit=2).render(_summary([DisplayRecord(title=title)]))

    card_lines = [line for line in output.splitlines() if line.startswith(("[ ]", "    word"))]
    assert len(card_lines) == 2
    assert card_lines[-1].endswith("...")
