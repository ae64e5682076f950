"""Formatting utility functions for clockin."""
import re
from datetime import datetime, timedelta, timezone

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S %z"
TIMESTAMP_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2} [+-]\d{4}")

def format_hm(duration: timedelta) -> str:
    """Format a duration as H:MM.

    Hours are truncated and unpadded, so totals above a day render as e.g. 31:05.

    Args:
        duration: Duration to format (can be negative)

    Returns:
        Formatted time string (with leading '-' if negative)
    """
    seconds = int(duration.total_seconds())
    if seconds < 0:
        return "-" + format_hm(timedelta(seconds=-seconds))
    minutes = seconds // 60
    return f"{minutes // 60}:{minutes % 60:02}"

def format_timestamp(dt: datetime) -> str:
    """Format a datetime in the storage timestamp format.

    Args:
        dt: Timezone-aware datetime

    Returns:
        Timestamp string, e.g. "2021-03-14 21:29:49 +0000"
    """
    return dt.strftime(TIMESTAMP_FORMAT)

def parse_timestamp(text: str) -> datetime:
    """Parse a storage timestamp and normalize it to UTC.

    Args:
        text: Timestamp string with UTC offset

    Returns:
        Timezone-aware UTC datetime

    Raises:
        ValueError: If the text does not match the timestamp format
    """
    if not TIMESTAMP_PATTERN.fullmatch(text):
        raise ValueError(f"Timestamp '{text}' is not in the form YYYY-MM-DD HH:MM:SS +HHMM")
    return datetime.strptime(text, TIMESTAMP_FORMAT).astimezone(timezone.utc)
