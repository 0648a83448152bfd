"""Luhmann ID grammar: delimiter, prefix and postfix of IDs embedded in filenames."""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import cached_property

# One segment of a Luhmann ID, e.g. "1", "a", "10".
SEGMENT = "[0-9a-zA-Z]+"

# Matches both "2018-07-09-2115" style timestamps and plain counters.
DEFAULT_PRIMARY_ID_PATTERN = r"[0-9]+(?:-[0-9]+)*"


class GrammarError(ValueError):
    """Raised when grammar options collide with each other or with primary IDs."""


@dataclass(frozen=True)
class IdGrammar:
    """How a Luhmann ID is delimited and wrapped inside a filename.

    Every regular expression used to find or query IDs is derived here, so the
    extractor and the query builder cannot drift apart.
    """

    prefix: str = "("
    postfix: str = ")"
    delimiter: str = ","
    primary_id_pattern: str = DEFAULT_PRIMARY_ID_PATTERN

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        options = {"prefix": self.prefix, "postfix": self.postfix, "delimiter": self.delimiter}
        for name, value in options.items():
            if not value:
                raise GrammarError(f"{name} must not be empty")
            if any(ch.isalnum() or ch.isspace() for ch in value):
                raise GrammarError(f"{name} {value!r} must not contain letters, digits or whitespace")

        values = list(options.values())
        if len(set(values)) != len(values):
            raise GrammarError(f"prefix, postfix and delimiter must differ (got {values!r})")

        try:
            primary = re.compile(self.primary_id_pattern)
        except re.error as e:
            raise GrammarError(f"Invalid primary_id_pattern {self.primary_id_pattern!r}: {e}") from e

        for name, value in options.items():
            if primary.search(value):
                raise GrammarError(f"{name} {value!r} collides with primary_id_pattern")

    # Escaped literals

    @property
    def prefix_re(self) -> str:
        return re.escape(self.prefix)

    @property
    def postfix_re(self) -> str:
        return re.escape(self.postfix)

    @property
    def delimiter_re(self) -> str:
        return re.escape(self.delimiter)

    # Derived patterns. Group "body" of each compiled regex holds the segments.

    @property
    def body(self) -> str:
        """One or more segments joined by the delimiter."""
        return f"{SEGMENT}(?:{self.delimiter_re}{SEGMENT})*"

    def anchored(self, source: str) -> str:
        """Tie `source` to the start of a filename, right after the primary ID."""
        return f"^(?:{self.primary_id_pattern})\\s*(?:{source})"

    @cached_property
    def id_regex(self) -> re.Pattern[str]:
        """The ID of a note filename, right after its primary ID."""
        return re.compile(self.anchored(f"{self.prefix_re}(?P<body>{self.body}){self.postfix_re}"))

    @cached_property
    def bare_id_regex(self) -> re.Pattern[str]:
        """An ID on its own, as typed by a user."""
        return re.compile(f"{self.prefix_re}(?P<body>{self.body}){self.postfix_re}")

    @cached_property
    def stem_regex(self) -> re.Pattern[str]:
        """An ID without its postfix at the start of a display line.

        The primary ID in front of it is optional, so both filename stems and
        candidate labels are read.
        """
        return re.compile(
            f"^\\s*(?:(?:{self.primary_id_pattern})\\s*)?{self.prefix_re}(?P<body>{self.body})(?={self.postfix_re})"
        )

    def join(self, segments: tuple[str, ...] | list[str]) -> str:
        return self.delimiter.join(segments)

    def split(self, body: str) -> tuple[str, ...]:
        return tuple(body.split(self.delimiter))
