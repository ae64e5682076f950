"""Parsing of report file lines into TimeEvents.

The storage format is one ``key: value`` pair per line, two lines per event::

    type: IN
    time: 2021-03-14 21:29:49 +0000

Lines are fed one at a time into an immutable EventBuilder. Each ``feed`` returns
the next builder state; once both fields are present the event is emitted and
parsing continues from an empty builder. Malformed lines are recorded as
ParseIssues and never abort the pass.
"""
from datetime import datetime
from enum import Enum
from typing import Iterable, List, NamedTuple, Optional, Tuple

from .time_event import EventKind, TimeEvent
from ..utils.format_utils import parse_timestamp

SEPARATOR = ": "

class IssueKind(Enum):
    DISCARDED = "discarded"
    FAILED = "failed"

class ParseIssue(NamedTuple):
    """A line the parser could not use.

    DISCARDED lines have the wrong shape or an unknown key; FAILED lines have
    a "time" key whose value is not a valid timestamp.
    """
    kind: IssueKind
    line: str

    @classmethod
    def discarded(cls, line: str) -> "ParseIssue":
        return cls(IssueKind.DISCARDED, line)

    @classmethod
    def failed(cls, line: str) -> "ParseIssue":
        return cls(IssueKind.FAILED, line)

class BuilderState(Enum):
    EMPTY = "empty"
    HAS_KIND = "has_kind"
    HAS_TIME = "has_time"
    COMPLETE = "complete"

class EventBuilder(NamedTuple):
    """Accumulates the two fields of one event."""
    kind: Optional[EventKind] = None
    timestamp: Optional[datetime] = None
    issues: Tuple[ParseIssue, ...] = ()

    @property
    def state(self) -> BuilderState:
        if self.kind is not None and self.timestamp is not None:
            return BuilderState.COMPLETE
        if self.kind is not None:
            return BuilderState.HAS_KIND
        if self.timestamp is not None:
            return BuilderState.HAS_TIME
        return BuilderState.EMPTY

    @property
    def pending_fields(self) -> int:
        """Number of fields set on a builder that has not completed."""
        return (self.kind is not None) + (self.timestamp is not None)

    def feed(self, line: str) -> "EventBuilder":
        """Apply one line and return the resulting builder.

        Args:
            line: Raw line from the report file

        Returns:
            New builder; self is left unchanged
        """
        parts = line.split(SEPARATOR)
        if len(parts) != 2:
            return self._replace(issues=self.issues + (ParseIssue.discarded(line),))

        key, value = parts
        if key == "time":
            try:
                timestamp = parse_timestamp(value)
            except ValueError:
                return self._replace(issues=self.issues + (ParseIssue.failed(line),))
            return self._replace(timestamp=timestamp)
        if key == "type":
            # An unknown kind only clears the field; it is not an issue.
            return self._replace(kind=EventKind.parse(value))
        return self._replace(issues=self.issues + (ParseIssue.discarded(line),))

    def build(self) -> TimeEvent:
        """Create the finished event.

        Returns:
            TimeEvent made of the accumulated fields

        Raises:
            ValueError: If the builder is not complete
        """
        if self.state is not BuilderState.COMPLETE:
            raise ValueError(f"Cannot build an event in state {self.state.value}")
        return TimeEvent(self.kind, self.timestamp)

class ParseResult(NamedTuple):
    """Outcome of parsing a whole report file."""
    events: List[TimeEvent]
    issues: List[ParseIssue]
    lines_read: int
    dropped_fields: int

def parse_lines(lines: Iterable[str]) -> ParseResult:
    """Parse report lines into events, keeping track of everything skipped.

    Args:
        lines: Raw lines, without line terminators

    Returns:
        ParseResult with events sorted by timestamp. Fields left pending at
        the end of input are counted in ``dropped_fields``.
    """
    events = []
    issues = []
    lines_read = 0
    builder = EventBuilder()
    for line in lines:
        lines_read += 1
        builder = builder.feed(line)
        if builder.state is BuilderState.COMPLETE:
            events.append(builder.build())
            issues.extend(builder.issues)
            builder = EventBuilder()
    issues.extend(builder.issues)
    events.sort(key=lambda e: e.timestamp)
    return ParseResult(events, issues, lines_read, builder.pending_fields)

def from_list(lines: Iterable[str]) -> List[TimeEvent]:
    """Parse report lines into events sorted by timestamp.

    Malformed lines and an incomplete trailing event are dropped silently;
    use parse_lines to inspect them.
    """
    return parse_lines(lines).events
