"""
clockin: A CLI tool for clocking in and out and tracking worked time.

- Records IN/OUT events with timestamps in a plain text file
- Summarizes today's events and the worked time of each day this week
- Tolerates malformed lines and unmatched IN/OUT events in the file
- Can be used as a CLI (via `python -m clockin` or `clockin` if installed as a package)
"""

__version__ = "0.1.0"
