"""ReportGenerator class for rendering a TimeReport as text tables."""
from io import StringIO
from tabulate import tabulate

from .time_report import TimeReport
from ..utils.date_utils import day_str
from ..utils.format_utils import format_hm, format_timestamp

class ReportGenerator:
    """Class for generating the daily and weekly summary of a TimeReport."""

    def __init__(self, report: TimeReport):
        """Initialize a ReportGenerator.

        Args:
            report: TimeReport to summarize
        """
        self.report = report

    def generate_report(self) -> str:
        """Generate a complete report.

        Returns:
            Report as a string
        """
        output = StringIO()

        self._generate_today_table(output)
        self._generate_week_table(output)

        return output.getvalue()

    def _generate_today_table(self, output: StringIO):
        """Generate the table of today's events.

        Args:
            output: StringIO to write to
        """
        today = self.report.now().date()
        events = self.report.events_on(today)

        print(f"\n### Today {day_str(today)}:", file=output)
        if not events:
            print("No events recorded today.", file=output)
            return

        rows = [[idx + 1, event.kind.value, format_timestamp(event.timestamp)] for idx, event in enumerate(events)]
        print(tabulate(rows, headers=["#", "Type", "Time (UTC)"], tablefmt="github"), file=output)
        print(f"\nToday total: {format_hm(self.report.total_time(events))}", file=output)

    def _generate_week_table(self, output: StringIO):
        """Generate the per-day totals for the current week.

        Args:
            output: StringIO to write to
        """
        week_totals = self.report.week_totals()
        first_day, last_day = week_totals[0][0], week_totals[-1][0]

        week_table = [[day_str(day), format_hm(total)] for day, total in week_totals]
        print(f"\n### Week {day_str(first_day)} to {day_str(last_day)}:", file=output)
        print(tabulate(week_table, headers=["Day", "Duration"], tablefmt="github"), file=output)
        print(f"\nΣDuration: {format_hm(self.report.week_total())}", file=output)

        print(file=output)  # Extra newline
