"""
Live progress panel for full passes over a dictionary file.

Shows lines read, records produced and throughput in a Rich Live display
that redraws in place instead of scrolling.
"""

import time
from typing import Any, Dict, Optional

from rich import box
from rich.console import Console
from rich.live import Live
from rich.panel import Panel
from rich.table import Table
from rich.text import Text


class ProgressDisplay:
    """
    Context manager showing live metrics for a pass over a dictionary file.

    Usage:
        with ProgressDisplay("Exporting kanjidic", total=len(reader)) as progress:
            for index in range(1, len(reader)):
                ...
                progress.update(Lines=index, Records=written)
    """

    def __init__(
        self,
        title: str = "Progress",
        total: Optional[int] = None,
        update_interval: int = 500,
        console: Optional[Console] = None,
    ):
        """
        Args:
            title: Panel title
            total: Line count of the file, for a percentage; None to omit
            update_interval: Redraw every N updates
            console: Console to draw on (stderr by default)
        """
        self.title = title
        self.total = total
        self.update_interval = update_interval
        self.console = console or Console(stderr=True)

        self.metrics: Dict[str, Any] = {}
        self.live: Optional[Live] = None
        self.start_time = 0.0
        self.updates = 0

    def __enter__(self):
        self.start_time = time.time()
        self.live = Live(self._make_panel(), console=self.console, refresh_per_second=8)
        self.live.__enter__()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self.live:
            self.live.update(self._make_panel())
            self.live.__exit__(exc_type, exc_val, exc_tb)
        return False

    def update(self, **metrics):
        """Record new metric values; the first metric drives rate and percent."""
        self.updates += 1
        self.metrics.update(metrics)

        if self.live and self.updates % self.update_interval == 0:
            self.live.update(self._make_panel())

    @property
    def elapsed(self) -> float:
        return time.time() - self.start_time if self.start_time else 0.0

    def _make_panel(self) -> Panel:
        grid = Table.grid(padding=(0, 2))
        grid.add_column(justify="left", no_wrap=True)
        grid.add_column(justify="right", no_wrap=True)

        for key, value in self._rows():
            grid.add_row(Text(f"{key}:", style="bold grey50"), Text(value, style="bright_cyan"))

        return Panel(grid, title=self.title, box=box.SIMPLE, border_style="bright_black")

    def _rows(self):
        for key, value in self.metrics.items():
            yield key, f"{value:,}" if isinstance(value, int) else str(value)

        elapsed = self.elapsed
        minutes, seconds = divmod(int(elapsed), 60)
        yield "Elapsed", f"{minutes:02d}:{seconds:02d}"

        if not self.metrics:
            return
        count = next(iter(self.metrics.values()))
        if not isinstance(count, int):
            return
        if elapsed > 0:
            yield "Rate", f"{count / elapsed:,.1f}/s"
        if self.total:
            yield "Done", f"{100.0 * count / self.total:.1f}%"
