import sys
import os
import unittest
from datetime import datetime, timezone, timedelta

# Add the parent directory to sys.path to import the clockin package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from clockin.reports.time_event import EventKind, TimeEvent
from clockin.reports.event_parser import (
    EventBuilder, BuilderState, IssueKind, ParseIssue, parse_lines, from_list
)

def utc(day, hour, minute=0, second=0):
    return datetime(2021, 3, day, hour, minute, second, tzinfo=timezone.utc)

class TestEventKind(unittest.TestCase):
    """Test parsing event kinds."""

    def test_parse(self):
        test_cases = [
            ("IN", EventKind.IN),
            ("OUT", EventKind.OUT),
            ("in", None),
            ("", None),
            ("BREAK", None),
        ]
        for text, expected in test_cases:
            with self.subTest(text=text):
                self.assertIs(EventKind.parse(text), expected)

class TestEventBuilder(unittest.TestCase):
    """Test the line-by-line builder state machine."""

    def test_states(self):
        builder = EventBuilder()
        self.assertIs(builder.state, BuilderState.EMPTY)

        with_kind = builder.feed("type: IN")
        self.assertIs(with_kind.state, BuilderState.HAS_KIND)
        self.assertIs(builder.state, BuilderState.EMPTY)  # feed does not mutate

        with_time = builder.feed("time: 2021-03-14 21:29:49 +0000")
        self.assertIs(with_time.state, BuilderState.HAS_TIME)

        complete = with_kind.feed("time: 2021-03-14 21:29:49 +0000")
        self.assertIs(complete.state, BuilderState.COMPLETE)
        self.assertEqual(complete.build(), TimeEvent(EventKind.IN, utc(14, 21, 29, 49)))

    def test_build_incomplete_raises(self):
        with self.assertRaises(ValueError):
            EventBuilder().feed("type: OUT").build()

    def test_issues(self):
        test_cases = [
            ("garbage", ParseIssue.discarded("garbage")),
            ("type: IN: extra", ParseIssue.discarded("type: IN: extra")),
            ("note: lunch", ParseIssue.discarded("note: lunch")),
            ("time: THIS WILL FAIL", ParseIssue.failed("time: THIS WILL FAIL")),
        ]
        for line, expected in test_cases:
            with self.subTest(line=line):
                builder = EventBuilder().feed(line)
                self.assertEqual(builder.issues, (expected,))
                self.assertIs(builder.state, BuilderState.EMPTY)

    def test_unknown_kind_clears_kind_without_issue(self):
        builder = EventBuilder().feed("type: IN").feed("type: LUNCH")
        self.assertIsNone(builder.kind)
        self.assertEqual(builder.issues, ())

    def test_failed_time_keeps_previous_time(self):
        builder = EventBuilder().feed("time: 2021-03-14 21:29:49 +0000").feed("time: nope")
        self.assertEqual(builder.timestamp, utc(14, 21, 29, 49))
        self.assertEqual(builder.issues[0].kind, IssueKind.FAILED)

    def test_offset_normalized_to_utc(self):
        builder = EventBuilder().feed("time: 2021-03-14 22:29:49 +0100")
        self.assertEqual(builder.timestamp, utc(14, 21, 29, 49))
        self.assertEqual(builder.timestamp.utcoffset(), timedelta(0))

class TestParseLines(unittest.TestCase):
    """Test parsing whole report files."""

    def test_mixed_input(self):
        lines = [
            "time: 2021-03-14 21:29:49 +0000",
            "time: THIS WILL FAIL",
            "type: IN",
            "Discard this line please",
            "type: OUT",
            "time: 2021-03-17 21:29:49 +0000",
        ]
        result = parse_lines(lines)
        self.assertEqual(result.events, [
            TimeEvent(EventKind.IN, utc(14, 21, 29, 49)),
            TimeEvent(EventKind.OUT, utc(17, 21, 29, 49)),
        ])
        self.assertEqual(result.issues, [
            ParseIssue.failed("time: THIS WILL FAIL"),
            ParseIssue.discarded("Discard this line please"),
        ])
        self.assertEqual(result.lines_read, 6)
        self.assertEqual(result.dropped_fields, 0)

    def test_malformed_lines_are_skipped(self):
        for bad_line in ["garbage", "type: SOMETIMES", "time: 2021-13-45 99:99:99 +0000"]:
            with self.subTest(bad_line=bad_line):
                lines = ["type: IN", "time: 2021-03-15 09:00:00 +0000", bad_line]
                self.assertEqual(from_list(lines), [TimeEvent(EventKind.IN, utc(15, 9))])

    def test_trailing_field_is_dropped_and_counted(self):
        lines = ["type: IN", "time: 2021-03-15 09:00:00 +0000", "type: OUT"]
        result = parse_lines(lines)
        self.assertEqual(len(result.events), 1)
        self.assertEqual(result.dropped_fields, 1)
        self.assertEqual(result.issues, [])
        self.assertEqual(len(from_list(lines)), 1)

    def test_events_are_sorted(self):
        lines = [
            "type: OUT", "time: 2021-03-15 17:00:00 +0000",
            "type: IN", "time: 2021-03-15 09:00:00 +0000",
            "time: 2021-03-15 12:00:00 +0000", "type: OUT",
        ]
        events = from_list(lines)
        self.assertEqual([e.timestamp for e in events], [utc(15, 9), utc(15, 12), utc(15, 17)])
        self.assertEqual([e.kind for e in events], [EventKind.IN, EventKind.OUT, EventKind.OUT])

    def test_empty_input(self):
        result = parse_lines([])
        self.assertEqual(result.events, [])
        self.assertEqual(result.lines_read, 0)
        self.assertEqual(result.dropped_fields, 0)

if __name__ == '__main__':
    unittest.main()
