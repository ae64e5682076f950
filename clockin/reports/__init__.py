"""Report modules for clockin."""

from .time_event import EventKind, TimeEvent
from .event_parser import ParseIssue, IssueKind, EventBuilder, BuilderState, ParseResult, parse_lines, from_list
from .time_report import TimeReport
from .report_generator import ReportGenerator

__all__ = [
    'EventKind', 'TimeEvent',
    'ParseIssue', 'IssueKind', 'EventBuilder', 'BuilderState', 'ParseResult', 'parse_lines', 'from_list',
    'TimeReport', 'ReportGenerator'
]
