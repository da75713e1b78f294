"""
Result Reporter.

Writes the fixed-width summary: one header and one data line per scenario,
each prefixed with the program name.
"""

import sys
from dataclasses import dataclass
from typing import TextIO

LABEL_WIDTH = 20
COLUMN_WIDTH = 12


@dataclass(frozen=True)
class ScenarioResult:
    """Timing and footprint of one scenario run."""

    label: str
    query_millis: int
    db_size: int
    insert_millis: int | None = None


class Reporter:
    """Line-oriented fixed-width writer."""

    def __init__(self, program: str = "sqlbench", stream: TextIO | None = None):
        self.prefix = f"{program:<16s} - "
        self.stream = stream or sys.stdout

    def _write(self, line: str) -> None:
        self.stream.write(self.prefix + line + "\n")
        self.stream.flush()

    def start(self) -> None:
        """Print the empty lead-in line."""
        self._write("")

    def report(self, result: ScenarioResult) -> None:
        label = f"{result.label:>{LABEL_WIDTH}s}"
        if result.insert_millis is None:
            headers = ["query", "dbsize"]
            values = [result.query_millis, result.db_size]
        else:
            headers = ["insert", "query", "dbsize"]
            values = [result.insert_millis, result.query_millis, result.db_size]
        self._write(" ".join([label] + [f"{h:>{COLUMN_WIDTH}s}" for h in headers]))
        self._write(" ".join([label] + [f"{v:>{COLUMN_WIDTH}d}" for v in values]))
