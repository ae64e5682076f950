"""TimeReport class for aggregating clock events into worked time."""
from datetime import datetime, date, timedelta
from typing import Callable, Iterable, List, Optional, Sequence, Tuple

from .time_event import EventKind, TimeEvent
from .event_parser import from_list
from ..utils.date_utils import utc_now, as_utc, days_until

class TimeReport:
    """All recorded events, kept sorted by timestamp."""

    def __init__(self, events: Optional[Iterable[TimeEvent]] = None,
                 clock: Callable[[], datetime] = utc_now):
        """Initialize a TimeReport.

        Args:
            events: Events in any order (optional)
            clock: Source of the current UTC instant
        """
        self.clock = clock
        self._events = sorted(events or [], key=lambda e: e.timestamp)

    @classmethod
    def from_lines(cls, lines: Iterable[str], clock: Callable[[], datetime] = utc_now) -> "TimeReport":
        """Build a report from report file lines.

        Args:
            lines: Raw report file lines
            clock: Source of the current UTC instant

        Returns:
            New TimeReport
        """
        return cls(from_list(lines), clock)

    @property
    def events(self) -> List[TimeEvent]:
        """Get a copy of the events, sorted by timestamp."""
        return list(self._events)

    def now(self) -> datetime:
        return as_utc(self.clock())

    def add_event(self, kind: EventKind) -> TimeEvent:
        """Record a new event at the current instant.

        Args:
            kind: Event kind

        Returns:
            The recorded event
        """
        event = TimeEvent.now(kind, self.clock)
        self._events.append(event)
        self._events.sort(key=lambda e: e.timestamp)
        return event

    def events_on(self, day: date) -> List[TimeEvent]:
        """Get the events whose UTC date is the given day."""
        return [e for e in self._events if e.day == day]

    def today(self) -> List[TimeEvent]:
        return self.events_on(self.now().date())

    def days_this_week(self) -> List[date]:
        """Get the days from this week's Monday through today, ascending."""
        return days_until(self.now().date())

    def total_time(self, events: Sequence[TimeEvent]) -> timedelta:
        """Sum the time spent clocked in over a chronological run of events.

        Each OUT closes the earliest IN still open, so repeated INs are ignored
        until an OUT arrives and an OUT without an open IN adds nothing. If the
        last open IN was never closed, the session is counted up to now.

        Args:
            events: Events in chronological order

        Returns:
            Total clocked-in time
        """
        total = timedelta(0)
        if not events:
            return total

        cursor = events[0]
        for event in events:
            if event.kind is EventKind.OUT:
                if cursor.kind is EventKind.IN:
                    total += event.timestamp - cursor.timestamp
                cursor = event
            elif cursor.kind is not EventKind.IN:
                cursor = event

        if cursor.kind is EventKind.IN:
            total += self.now() - cursor.timestamp
        return total

    def total_on(self, day: date) -> timedelta:
        return self.total_time(self.events_on(day))

    def week_totals(self) -> List[Tuple[date, timedelta]]:
        """Get the total for each day of the current week so far.

        Returns:
            List of (day, total) tuples, Monday first
        """
        return [(day, self.total_on(day)) for day in self.days_this_week()]

    def week_total(self) -> timedelta:
        return sum((total for _, total in self.week_totals()), timedelta(0))

    def serialize(self) -> List[str]:
        """Convert all events to report file lines, in order."""
        return [line for event in self._events for line in event.serialize()]
