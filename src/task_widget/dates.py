"""Calendar-day helpers for relative task labels."""

import re
from datetime import date, datetime

# Leading YYYY-MM-DD; anything after it (time, timezone) is ignored
_DATE_PREFIX = re.compile(r"^\s*(\d{4})-(\d{1,2})-(\d{1,2})")


def parse_calendar_date(value: str | None) -> date | None:
    """Parse the leading YYYY-MM-DD part of value into a date.

    Returns None for empty input, a missing date prefix, or an impossible
    calendar date such as 2024-02-30.
    """
    if not value:
        return None
    match = _DATE_PREFIX.match(value)
    if not match:
        return None
    year, month, day = (int(part) for part in match.groups())
    try:
        return date(year, month, day)
    except ValueError:
        return None


def _require_date(date_str: str) -> date:
    parsed = parse_calendar_date(date_str)
    if parsed is None:
        raise ValueError(f"Invalid calendar date: {date_str!r}")
    return parsed


def format_relative_label(date_str: str, today: date) -> str:
    """Describe date_str relative to today.

    Args:
        date_str: Date in YYYY-MM-DD form
        today: Reference calendar day for this render pass

    Returns:
        "Today", "Tomorrow", "Yesterday", "Nd overdue", "Nd" (2..7 days ahead)
        or "M/D" for anything further out

    Raises:
        ValueError: If date_str is not a valid calendar date
    """
    target = _require_date(date_str)
    diff_days = (target - today).days

    if diff_days == 0:
        return "Today"
    if diff_days == 1:
        return "Tomorrow"
    if diff_days == -1:
        return "Yesterday"
    if diff_days < -1:
        return f"{abs(diff_days)}d overdue"
    if diff_days <= 7:
        return f"{diff_days}d"
    return f"{target.month}/{target.day}"


def is_overdue(date_str: str, today: date) -> bool:
    """Return True if date_str is strictly before today."""
    return _require_date(date_str) < today


def format_updated_at(moment: datetime) -> str:
    """Format a timestamp as h:mm AM/PM (no leading zero on the hour)."""
    hour = moment.hour % 12 or 12
    suffix = "AM" if moment.hour < 12 else "PM"
    return f"{hour}:{moment.minute:02d} {suffix}"
