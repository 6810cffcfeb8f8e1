#!/usr/bin/env python3
"""
Progress UI
===========
Rich-based progress display for the aggregation pass. Writes to stderr so
the report on stdout stays clean.

Usage:
    from ngramkit.ui import AnalysisProgress

    with AnalysisProgress(total=len(words)) as progress:
        result = analyze(words, on_progress=progress.update)
"""

from typing import Optional

from rich.console import Console
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    SpinnerColumn,
    TextColumn,
    TimeElapsedColumn,
)


class AnalysisProgress:
    """Progress bar for words processed; silent when disabled or not a TTY."""

    def __init__(self, total: int, quiet: bool = False, console: Optional[Console] = None):
        self.total = total
        self.console = console or Console(stderr=True)
        self.quiet = quiet
        self.enabled = not quiet and self.console.is_terminal
        self.count = 0
        self._progress: Optional[Progress] = None
        self._task = None

    def __enter__(self):
        if self.enabled:
            self._progress = Progress(
                SpinnerColumn(),
                TextColumn("[bold]Counting n-grams"),
                BarColumn(),
                MofNCompleteColumn(),
                TimeElapsedColumn(),
                console=self.console,
                transient=True,
            )
            self._progress.__enter__()
            self._task = self._progress.add_task("aggregate", total=self.total)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self._progress:
            if exc_type is None:
                self._progress.update(self._task, completed=self.total)
            self._progress.__exit__(exc_type, exc_val, exc_tb)
        return False

    def update(self, count: int):
        """Record the running word count (usable as an ``on_progress`` callback)."""
        self.count = count
        if self._progress:
            self._progress.update(self._task, completed=count)
