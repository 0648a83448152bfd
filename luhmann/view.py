"""Index view: the list of notes the navigator operates on, rendered with rich."""

from __future__ import annotations

import re
from pathlib import PurePath

from rich.console import Console
from rich.table import Table
from rich.text import Text

from .host import Formatter, Sorter


class StemFormatter:
    """Show a note by its filename without directories and extension."""

    def format(self, files: list[str]) -> list[str]:
        return [PurePath(f).stem for f in files]


def _token_regex(text: str) -> re.Pattern[str]:
    return re.compile(rf"(?<![0-9A-Za-z]){re.escape(text)}(?![0-9A-Za-z])")


class IndexView:
    """In-memory display buffer: files, their rendered lines and a cursor.

    The highlight is transient: it is shown by the next `render` and then
    cleared.
    """

    def __init__(self, title: str = "Luhmann index"):
        self.title = title
        self.cursor = 0
        self._files: list[str] = []
        self._lines: list[str] = []
        self._highlight: int | None = None

    def render_list(self, files: list[str], formatter: Formatter, sorter: Sorter) -> None:
        self._files = sorter.sort(files)
        self._lines = formatter.format(self._files)
        self._highlight = None
        self.cursor = min(self.cursor, max(len(self._lines) - 1, 0))

    def current_files(self) -> list[str]:
        return list(self._files)

    def lines(self) -> list[str]:
        return list(self._lines)

    def current_file(self) -> str | None:
        if 0 <= self.cursor < len(self._files):
            return self._files[self.cursor]
        return None

    def goto_line_matching(self, text: str) -> bool:
        """Move the cursor to the first line starting with `text`, else containing it.

        `text` must stand alone as a token, so "1" does not land on "10 (1)".
        """
        pattern = _token_regex(text)
        for i, line in enumerate(self._lines):
            if pattern.match(line):
                self.cursor = i
                return True
        for i, line in enumerate(self._lines):
            if pattern.search(line):
                self.cursor = i
                return True
        return False

    def highlight_line(self) -> None:
        self._highlight = self.cursor

    @property
    def highlighted_line(self) -> int | None:
        return self._highlight

    def move(self, delta: int) -> None:
        if self._lines:
            self.cursor = max(0, min(len(self._lines) - 1, self.cursor + delta))

    def render(self, console: Console) -> None:
        table = Table(title=self.title, show_header=False, box=None, pad_edge=False)
        table.add_column("", width=2)
        table.add_column("note")

        for i, line in enumerate(self._lines):
            marker = ">" if i == self.cursor else ""
            style = ""
            if i == self._highlight:
                style = "bold black on yellow"
            elif i == self.cursor:
                style = "bold cyan"
            table.add_row(marker, Text(line, style=style))

        if not self._lines:
            console.print("[dim]No notes to show.[/dim]")
        else:
            console.print(table)
        self._highlight = None
