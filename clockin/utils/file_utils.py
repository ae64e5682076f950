"""File I/O utility functions for clockin."""
import os
import sys
import tempfile
from typing import List

class ReportFile:
    """The text file backing a time report."""

    def __init__(self, path: str):
        """Initialize a ReportFile.

        Args:
            path: Location of the report file
        """
        self.path = path

    def ensure_exists(self) -> None:
        """Create an empty report file if none exists at the path."""
        if os.path.exists(self.path):
            return
        print(f"[INFO] File '{self.path}' does not exist. Creating new file.")
        try:
            with open(self.path, 'w', encoding='utf-8'):
                pass
        except OSError as e:
            print(f"[ERROR] Failed to create '{self.path}': {e}")
            sys.exit(2)

    def read_lines(self) -> List[str]:
        """Read the report file.

        Undecodable bytes are replaced, so such lines fail to parse instead of
        aborting the read.

        Returns:
            File lines without line terminators
        """
        try:
            with open(self.path, 'r', encoding='utf-8', errors='replace') as f:
                return f.read().splitlines()
        except OSError as e:
            print(f"[ERROR] Failed to read '{self.path}': {e}")
            sys.exit(2)

    def write_lines(self, lines: List[str]) -> None:
        """Overwrite the report file with the given lines.

        The lines go to a temporary file next to the report, which then replaces
        it, so a failed write leaves the previous report in place.

        Args:
            lines: Lines to write, one per row
        """
        print(f"[INFO] Writing report to '{self.path}'")
        directory = os.path.dirname(os.path.abspath(self.path))
        tmp_path = None
        try:
            with tempfile.NamedTemporaryFile('w', encoding='utf-8', dir=directory,
                                             prefix='.clockin-', delete=False) as f:
                tmp_path = f.name
                for line in lines:
                    f.write(f"{line}\n")
            os.replace(tmp_path, self.path)
        except OSError as e:
            if tmp_path and os.path.exists(tmp_path):
                os.remove(tmp_path)
            print(f"[ERROR] Failed to write to '{self.path}': {e}")
            sys.exit(2)
