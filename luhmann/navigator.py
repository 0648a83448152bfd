"""Tree navigation over a live, filtered list of notes.

The navigator keeps no tree and no state of its own. Each operation reads the
display (its files and the cursor line), builds a query from the ID found
there, asks the file service for matching files, sorts them and re-renders the
display. When an operation leaves the display unchanged it escalates to a
broader one instead of failing:

    step_forward -> unfold -> focus_top_level -> focus_all
    step_back    -> focus_top_level -> focus_all
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from .grammar import IdGrammar
from .host import Display, FileService, Formatter
from .ids import LuhmannID, extract_id_from_cursor_line
from .queries import QueryBuilder
from .sorting import Comparator
from .view import StemFormatter

logger = logging.getLogger(__name__)


class TreeNavigator:
    def __init__(
        self,
        grammar: IdGrammar,
        files: FileService,
        display: Display,
        formatter: Formatter | None = None,
        *,
        recursive: bool = False,
    ):
        self.grammar = grammar
        self.files = files
        self.display = display
        self.formatter = formatter or StemFormatter()
        self.recursive = recursive
        self.queries = QueryBuilder(grammar)
        self.comparator = Comparator(grammar)

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _query(self, pattern: str) -> list[str]:
        files = self.files.list_files(self.recursive, pattern)
        logger.debug("Query %r matched %d files", pattern, len(files))
        return files

    def _show(self, files: list[str]) -> list[str]:
        self.display.render_list(files, self.formatter, self.comparator)
        return self.display.current_files()

    def _id_under_cursor(self) -> LuhmannID | None:
        return extract_id_from_cursor_line(self.display.lines(), self.display.cursor, self.grammar)

    def _expand(
        self,
        *,
        root_only: bool,
        highlight: bool,
        fallback: Callable[[], list[str]],
    ) -> list[str]:
        """Show the node under the cursor and its direct children.

        With `root_only` the query is seeded with the first segment of the ID
        instead of the whole ID.
        """
        before = self.display.current_files()
        luhmann_id = self._id_under_cursor()
        if luhmann_id is None:
            logger.debug("Empty line, nothing to expand")
            return before

        seed = luhmann_id.root if root_only else luhmann_id
        after = self._show(self._query(self.queries.descendants_and_siblings_of(seed)))
        if self.display.goto_line_matching(luhmann_id.raw) and highlight:
            self.display.highlight_line()

        if after == before:
            logger.debug("Expanding %s changed nothing, falling back to %s", seed, fallback.__name__)
            return fallback()
        return after

    # -------------------------------------------------------------------------
    # Operations
    # -------------------------------------------------------------------------

    def focus_all(self) -> list[str]:
        """Show every note that has a Luhmann ID."""
        return self._show(self._query(self.queries.all_luhmann_files()))

    def focus_top_level(self) -> list[str]:
        """Show the root notes, or every Luhmann note if that changes nothing."""
        before = self.display.current_files()
        after = self._show(self._query(self.queries.top_level_files()))
        if after == before:
            logger.debug("Top level unchanged, falling back to focus_all")
            return self.focus_all()
        return after

    def step_forward(self) -> list[str]:
        """Descend one level below the note under the cursor."""
        return self._expand(root_only=False, highlight=False, fallback=self.unfold)

    def unfold(self) -> list[str]:
        """Show the whole first level of the branch the cursor note belongs to."""
        return self._expand(root_only=True, highlight=True, fallback=self.focus_top_level)

    def step_back(self) -> list[str]:
        """Climb one level up from the first note of the display."""
        ordered = self.comparator.sort(self.display.current_files())
        luhmann_id = extract_id_from_cursor_line(self.formatter.format(ordered), 0, self.grammar)
        before = self._show(ordered)
        if luhmann_id is None:
            logger.debug("Empty display, nothing to step back from")
            return before

        if luhmann_id.is_root:
            pattern = self.queries.exact_prefix_match(luhmann_id)
        else:
            pattern = self.queries.ancestor_query(luhmann_id.parent)

        after = self._show(self._query(pattern))
        if self.display.goto_line_matching(luhmann_id.raw):
            self.display.highlight_line()

        if after == before:
            logger.debug("Stepping back from %s changed nothing, falling back to focus_top_level", luhmann_id)
            return self.focus_top_level()
        return after

    def set_depth_window(self, n: int) -> list[str]:
        """Keep only the displayed notes whose ID has exactly `n` segments."""
        matching = set(self._query(self.queries.depth_window(n)))
        return self._show([f for f in self.display.current_files() if f in matching])

    def jump_to_current_note(self) -> list[str]:
        """Show every Luhmann note and move to the active one."""
        files = self.focus_all()
        note_id = self.files.current_note_id()
        if note_id and self.display.goto_line_matching(note_id):
            self.display.highlight_line()
        else:
            logger.debug("Current note %r is not in the index", note_id)
        return files
