"""TimeEvent class for representing clock-in and clock-out events."""
from datetime import datetime, date
from enum import Enum
from typing import Callable, List, Optional

from ..utils.date_utils import utc_now, as_utc
from ..utils.format_utils import format_timestamp

class EventKind(Enum):
    """Whether an event starts or stops a tracked session."""

    IN = "IN"
    OUT = "OUT"

    @classmethod
    def parse(cls, text: str) -> Optional["EventKind"]:
        """Parse the canonical text form of an event kind.

        Args:
            text: "IN" or "OUT"

        Returns:
            The matching EventKind, or None if the text is not recognized
        """
        for kind in cls:
            if kind.value == text:
                return kind
        return None

class TimeEvent:
    """A timestamped IN or OUT marker.

    Events order by timestamp only; two events at the same instant are
    neither less nor greater than each other whatever their kind.
    """

    __slots__ = ("kind", "timestamp")

    def __init__(self, kind: EventKind, timestamp: datetime):
        """Initialize a TimeEvent.

        Args:
            kind: Event kind
            timestamp: Timezone-aware UTC datetime
        """
        object.__setattr__(self, "kind", kind)
        object.__setattr__(self, "timestamp", timestamp)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        return (TimeEvent, (self.kind, self.timestamp))

    @classmethod
    def now(cls, kind: EventKind, clock: Callable[[], datetime] = utc_now) -> "TimeEvent":
        """Create an event at the current instant.

        Args:
            kind: Event kind
            clock: Source of the current UTC instant

        Returns:
            New TimeEvent, truncated to whole seconds
        """
        return cls(kind, as_utc(clock()).replace(microsecond=0))

    @property
    def day(self) -> date:
        return self.timestamp.date()

    def __lt__(self, other: "TimeEvent") -> bool:
        return self.timestamp < other.timestamp

    def __le__(self, other: "TimeEvent") -> bool:
        return self.timestamp <= other.timestamp

    def __gt__(self, other: "TimeEvent") -> bool:
        return self.timestamp > other.timestamp

    def __ge__(self, other: "TimeEvent") -> bool:
        return self.timestamp >= other.timestamp

    def __eq__(self, other) -> bool:
        if not isinstance(other, TimeEvent):
            return NotImplemented
        return self.kind is other.kind and self.timestamp == other.timestamp

    def __hash__(self) -> int:
        return hash((self.kind, self.timestamp))

    def __repr__(self) -> str:
        return f"TimeEvent({self.kind.value}, {format_timestamp(self.timestamp)})"

    def serialize(self) -> List[str]:
        """Convert to storage lines.

        Returns:
            The "type:" line followed by the "time:" line
        """
        return [
            f"type: {self.kind.value}",
            f"time: {format_timestamp(self.timestamp)}",
        ]
