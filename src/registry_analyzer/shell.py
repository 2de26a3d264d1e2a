"""Interactive command loop over a loaded `RecordStore`.

Commands:
- `summary by zip`: prompt for a postal code and print its summary
- `summary by naics`: prompt for a NAICS code and print its summary
- `general summary`: dataset totals
- `top naics`: largest classification groups
- `history`: commands entered so far
- `quit`: leave the loop (end of input does the same)
"""
from __future__ import annotations

import logging
import sys
from collections import deque
from datetime import date
from typing import Callable, TextIO

from registry_analyzer.aggregate.breakdown import classification_breakdown
from registry_analyzer.aggregate.summaries import (
    general_summary,
    summary_by_classification_code,
    summary_by_postal_code,
)
from registry_analyzer.errors import ClassificationNotFoundError
from registry_analyzer.store import RecordStore

log = logging.getLogger(__name__)

PROMPT = "> "
TOP_N = 10


class RegistryShell:
    """Line-oriented shell that answers registry queries.

    Args:
        store: Store to query.
        stdin: Stream commands are read from.
        stdout: Stream results are written to.
        history_size: Maximum remembered commands, None for unbounded.
        today: Fixed evaluation day; the system clock is used when None.
    """

    def __init__(
        self,
        store: RecordStore,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        history_size: int | None = None,
        today: date | None = None,
    ) -> None:
        self.store = store
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.history: deque[str] = deque(maxlen=history_size)
        self.today = today
        self._commands: dict[str, Callable[[], None]] = {
            "summary by zip": self.summary_by_zip,
            "summary by naics": self.summary_by_naics,
            "general summary": self.general_summary,
            "top naics": self.top_naics,
            "history": self.show_history,
        }

    # --------------------------------------------------
    # I/O helpers
    # --------------------------------------------------
    def _print(self, text: str = "") -> None:
        self.stdout.write(text + "\n")

    def _ask(self, prompt: str) -> str | None:
        """Write `prompt` and read one line; None at end of input."""
        self.stdout.write(prompt)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            return None
        return line.rstrip("\r\n")

    # --------------------------------------------------
    # Commands
    # --------------------------------------------------
    def summary_by_zip(self) -> None:
        code = self._ask("Enter a zip code: ")
        if code is None:
            return
        s = summary_by_postal_code(self.store, code.strip())
        self._print(f"{s.postal_code} Business Summary")
        self._print(f"Total Businesses: {s.total_count}")
        self._print(f"Business Types: {s.distinct_classification_code_count}")
        self._print(f"Neighborhoods: {s.distinct_neighborhood_count}")

    def summary_by_naics(self) -> None:
        code = self._ask("Enter NAICS code: ")
        if code is None:
            return
        try:
            s = summary_by_classification_code(self.store, code)
        except ClassificationNotFoundError as e:
            self._print(str(e))
            return
        self._print(f"Total businesses: {s.total_count}")
        self._print(f"Zip Codes: {s.distinct_postal_code_count}")
        self._print(f"Neighborhood: {s.distinct_neighborhood_count}")

    def general_summary(self) -> None:
        s = general_summary(self.store, self.today)
        self._print(f"Total Businesses: {s.total_businesses}")
        self._print(f"Closed Businesses: {s.closed_businesses}")
        self._print(f"New Business in last year: {s.new_businesses_last_year}")

    def top_naics(self) -> None:
        table = classification_breakdown(self.store, self.today)
        if table.empty:
            self._print("No businesses loaded.")
            return
        self._print(table.head(TOP_N).to_string(index=False))

    def show_history(self) -> None:
        self._print("Command history")
        for command in self.history:
            self._print(command)

    # --------------------------------------------------
    # Loop
    # --------------------------------------------------
    def run(self) -> None:
        """Read and execute commands until `quit` or end of input."""
        while True:
            line = self._ask(PROMPT)
            if line is None:
                log.debug("End of input, leaving shell")
                return
            command = line.strip()
            self.history.append(command)
            if command == "quit":
                return
            handler = self._commands.get(command)
            if handler is None:
                self._print("Command not recognized.")
                continue
            handler()
