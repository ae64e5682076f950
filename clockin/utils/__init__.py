"""Utility modules for clockin."""

from .date_utils import utc_now, as_utc, get_week_start, days_until, day_str
from .format_utils import TIMESTAMP_FORMAT, format_hm, format_timestamp, parse_timestamp
from .file_utils import ReportFile

__all__ = [
    'utc_now', 'as_utc', 'get_week_start', 'days_until', 'day_str',
    'TIMESTAMP_FORMAT', 'format_hm', 'format_timestamp', 'parse_timestamp',
    'ReportFile'
]
