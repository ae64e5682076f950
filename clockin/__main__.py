"""Main module for the clockin package."""
import os
import sys
import argparse
from typing import Optional
from dotenv import load_dotenv

from .utils.file_utils import ReportFile
from .utils.format_utils import format_timestamp
from .reports.time_event import EventKind
from .reports.event_parser import IssueKind, parse_lines
from .reports.time_report import TimeReport
from .reports.report_generator import ReportGenerator

PATH_VAR = "TIME_REPORT_PATH"

# --- Environment Setup ---
def load_environment():
    """Load environment variables from the clockin.env file, if there is one."""
    env_file = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'clockin.env')
    if os.path.exists(env_file):
        load_dotenv(env_file)

def get_env_var(key: str) -> str:
    """Get an environment variable or exit if not found.

    Args:
        key: Environment variable name

    Returns:
        Environment variable value

    Raises:
        SystemExit: If the environment variable is not found
    """
    value = os.getenv(key)
    if not value:
        print(f"Set {key} in your environment or clockin.env.")
        sys.exit(1)
    return value

# --- CLI Logic ---
def parse_args(argv=None) -> argparse.Namespace:
    """Parse command line arguments.

    Returns:
        Parsed arguments
    """
    parser = argparse.ArgumentParser(
        description="Clock in and out, and show today's events and this week's worked time.",
        epilog=f"""
Examples:
    # Show today's events and this week's totals
  clockin
    ---
    # Clock in
  clockin in
    ---
    # Clock out (any value other than "in" clocks out)
  clockin out

The report file is read from ${PATH_VAR}.
""",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        prog="clockin"
    )
    parser.add_argument('event', nargs='?', help='"in" to clock in, anything else to clock out (case-insensitive)')
    return parser.parse_args(argv)

def resolve_event_kind(value: str) -> EventKind:
    """Map a CLI argument to an event kind.

    Args:
        value: Argument as typed by the user

    Returns:
        EventKind.IN for "in" in any case, otherwise EventKind.OUT
    """
    return EventKind.IN if value.upper() == EventKind.IN.value else EventKind.OUT

def load_report(report_file: ReportFile) -> TimeReport:
    """Read and parse the report file, warning about anything skipped.

    Args:
        report_file: Storage of the report

    Returns:
        TimeReport of all parsed events
    """
    report_file.ensure_exists()
    result = parse_lines(report_file.read_lines())

    for issue in result.issues:
        if issue.kind is IssueKind.FAILED:
            print(f"[WARN] Failed to parse line: {issue.line}")
        else:
            print(f"[WARN] Discarded line: {issue.line}")
    if result.dropped_fields:
        print(f"[WARN] Dropped {result.dropped_fields} incomplete trailing field(s)")

    return TimeReport(result.events)

def clock_interface(report_file: ReportFile, event: Optional[str] = None) -> TimeReport:
    """Main interface: record an event if one was given, then print the report.

    Args:
        report_file: Storage of the report
        event: CLI event argument (optional)

    Returns:
        The report as printed
    """
    report = load_report(report_file)

    if event is not None:
        kind = resolve_event_kind(event)
        new_event = report.add_event(kind)
        report_file.write_lines(report.serialize())
        print(f"[INFO] Clocked {kind.value} at {format_timestamp(new_event.timestamp)}")

    print(ReportGenerator(report).generate_report())
    return report

def main(argv=None) -> None:
    """Main entry point."""
    # Load environment variables
    load_environment()

    # Parse command line arguments
    args = parse_args(argv)

    report_file = ReportFile(get_env_var(PATH_VAR))
    clock_interface(report_file, args.event)

if __name__ == "__main__":
    main()
