from __future__ import annotations

import traceback
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Iterable

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .dictionary import Entry


@dataclass(slots=True)
class RichLogger:
    """Wrapper around Rich console output that also appends to a log file.

    Messages are printed literally; dictionary text such as ``[b]`` is never
    read as Rich markup.
    """

    log_file: Path
    console: Console = field(default_factory=Console)

    def log_text(self, message: str) -> None:
        self.console.print(escape(message))
        self._write_line(message)

    def log_panel(self, message: str, title: str, style: str) -> None:
        panel = Panel(escape(message), border_style=style, title=escape(title))
        self.console.print(panel)
        self._write_line(f"{title}: {message}")

    def log_exception(self, error: Exception) -> None:
        self.log_panel(str(error), "ERROR", "red")
        tb = traceback.format_exc()
        self._write_line(tb)

    def log_entries(self, entries: Iterable[Entry], title: str = "Dictionary") -> int:
        table = Table(title=escape(title))
        table.add_column("#", justify="right", style="dim")
        table.add_column("Key", style="cyan")
        table.add_column("Current", style="green")
        table.add_column("Evolution")
        rows = 0
        for index, entry in enumerate(entries):
            table.add_row(str(index), escape(entry.key), escape(entry.current), escape(entry.chain_to_string()))
            rows += 1
        self.console.print(table)
        self._write_line(f"{title}: listed {rows} entries")
        return rows

    def _write_line(self, message: str) -> None:
        timestamp = datetime.now().isoformat(timespec="seconds")
        with self.log_file.open("a", encoding="utf-8") as handle:
            handle.write(f"{timestamp} - {message}\n")
