"""Ordering of notes by their Luhmann IDs."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import PurePath

from .grammar import IdGrammar
from .ids import LuhmannID, extract_id


def compare(a: LuhmannID | None, b: LuhmannID | None) -> int:
    """Compare two IDs by their raw delimited strings.

    String order, not numeric: ``(1,10)`` sorts before ``(1,2)``. A missing ID
    sorts before every present one.
    """
    ka = a.raw if a else ""
    kb = b.raw if b else ""
    return (ka > kb) - (ka < kb)


def sort_key(filename: str, grammar: IdGrammar) -> str:
    luhmann_id = extract_id(PurePath(filename).name, grammar)
    return luhmann_id.raw if luhmann_id else ""


def sort_files(files: Iterable[str], grammar: IdGrammar) -> list[str]:
    """Stable sort of filenames by Luhmann ID; files without one come first."""
    return sorted(files, key=lambda f: sort_key(f, grammar))


class Comparator:
    """Sort strategy handed to a display when it renders a file set."""

    def __init__(self, grammar: IdGrammar):
        self.grammar = grammar

    def key(self, filename: str) -> str:
        return sort_key(filename, self.grammar)

    def sort(self, files: Iterable[str]) -> list[str]:
        return sort_files(files, self.grammar)

    def __call__(self, files: Iterable[str]) -> list[str]:
        return self.sort(files)
