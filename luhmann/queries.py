"""Search patterns for retrieving related notes from the file-listing service.

Every method returns a regular expression source string. The builder never
touches the file system; patterns are handed to `FileService.list_files`.
Each pattern is anchored at the primary ID, so a parenthesized word in a
title never counts as a Luhmann ID.
"""

from __future__ import annotations

import re

from .grammar import SEGMENT, IdGrammar
from .ids import LuhmannID


class QueryBuilder:
    def __init__(self, grammar: IdGrammar):
        self.grammar = grammar

    def _stem(self, luhmann_id: LuhmannID | str) -> str:
        stem = luhmann_id.stem if isinstance(luhmann_id, LuhmannID) else luhmann_id
        return re.escape(stem)

    def all_luhmann_files(self) -> str:
        """Every note whose primary ID is followed by a Luhmann ID."""
        g = self.grammar
        return g.anchored(g.prefix_re)

    def top_level_files(self) -> str:
        """Notes whose ID has exactly one segment."""
        g = self.grammar
        return g.anchored(f"{g.prefix_re}{SEGMENT}{g.postfix_re}")

    def descendants_and_siblings_of(self, luhmann_id: LuhmannID | str) -> str:
        """The node itself, or exactly one level deeper.

        ``(1,1`` matches ``(1,1)`` and ``(1,1,a)`` but not ``(1,1,a,2)``.
        """
        g = self.grammar
        stem = self._stem(luhmann_id)
        return g.anchored(f"{stem}{g.postfix_re}|{stem}{g.delimiter_re}{SEGMENT}{g.postfix_re}")

    def ancestor_query(self, sub_id: LuhmannID | str) -> str:
        """Same shape as descendants_and_siblings_of, rooted at a parent ID."""
        return self.descendants_and_siblings_of(sub_id)

    def exact_prefix_match(self, luhmann_id: LuhmannID | str) -> str:
        """The node and its whole subtree."""
        g = self.grammar
        stem = self._stem(luhmann_id)
        return g.anchored(f"{stem}(?:{g.postfix_re}|{g.delimiter_re})")

    def depth_window(self, n: int) -> str:
        """IDs with exactly `n` segments (n in 1..9)."""
        if not 1 <= n <= 9:
            raise ValueError(f"Depth must be between 1 and 9, got {n}")
        g = self.grammar
        return g.anchored(f"{g.prefix_re}{SEGMENT}(?:{g.delimiter_re}{SEGMENT}){{{n - 1}}}{g.postfix_re}")
