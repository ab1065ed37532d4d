"""Date helpers for daily notes (date-only, no time zones)."""

import re
from datetime import date, timedelta

from obsidian_manager.core.errors import ValidationError

_DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}")


def parse_date(date_str: str) -> date:
    """Parse a YYYY-MM-DD string, raising ValidationError otherwise."""
    if not _DATE_RE.fullmatch(date_str):
        raise ValidationError(
            f"Invalid date format: {date_str}. Expected YYYY-MM-DD format."
        )
    try:
        return date.fromisoformat(date_str)
    except ValueError as e:
        raise ValidationError(f"Invalid date: {date_str} ({e})") from e


def format_date(value: date) -> str:
    """Format a date as YYYY-MM-DD."""
    return value.isoformat()


def next_day(value: date) -> date:
    """Return the following calendar day."""
    return value + timedelta(days=1)


def previous_day(value: date) -> date:
    """Return the preceding calendar day."""
    return value - timedelta(days=1)
