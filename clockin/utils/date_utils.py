"""Date utility functions for clockin."""
from datetime import datetime, date, timezone, timedelta
from typing import List

def utc_now() -> datetime:
    """Get the current instant in UTC, truncated to whole seconds.

    Returns:
        Timezone-aware UTC datetime
    """
    return datetime.now(timezone.utc).replace(microsecond=0)

def as_utc(dt: datetime) -> datetime:
    """Convert a timezone-aware datetime to UTC."""
    return dt.astimezone(timezone.utc)

def get_week_start(target_date: date, week_start: int = 0) -> date:
    """Get the first day of the week containing the target date.

    Args:
        target_date: Date within the week
        week_start: Day of week to start on (0=Monday, 6=Sunday)

    Returns:
        Start date of the week
    """
    wd = (target_date.weekday() - week_start) % 7
    return target_date - timedelta(days=wd)

def days_until(target_date: date) -> List[date]:
    """List the days from the start of the target date's week up to the target date.

    Args:
        target_date: Last day to include

    Returns:
        Ascending list of dates, Monday first
    """
    start = get_week_start(target_date)
    return [start + timedelta(days=i) for i in range((target_date - start).days + 1)]

def day_str(dt: date) -> str:
    """Format a date as a string with day of week.

    Args:
        dt: Date to format

    Returns:
        Formatted date string
    """
    return f"({['Mo','Tue','Wed','Thu','Fri','Sat','Sun'][dt.weekday()]}){dt}"
