"""Interfaces of the host note system that the navigator calls into."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol


class FileService(Protocol):
    """Note corpus listing. `pattern` is a regular expression searched in each filename."""

    def list_files(self, recursive: bool, pattern: str) -> list[str]: ...

    def current_note_id(self) -> str | None: ...


class Formatter(Protocol):
    """Turns filenames into human-readable display lines."""

    def format(self, files: list[str]) -> list[str]: ...


class Sorter(Protocol):
    def sort(self, files: Iterable[str]) -> list[str]: ...


class Display(Protocol):
    """The list/index view the navigator reads from and re-renders."""

    cursor: int

    def render_list(self, files: list[str], formatter: Formatter, sorter: Sorter) -> None: ...

    def current_files(self) -> list[str]: ...

    def lines(self) -> list[str]: ...

    def goto_line_matching(self, text: str) -> bool: ...

    def highlight_line(self) -> None: ...
