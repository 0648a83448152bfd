"""Luhmann ID value type and extraction from filenames and display lines."""

from __future__ import annotations

from dataclasses import dataclass, field

from .grammar import IdGrammar


class NotALuhmannNoteError(ValueError):
    """The line under the cursor has text but no Luhmann ID."""

    def __init__(self, line: str):
        super().__init__(f"Not a Luhmann note: {line.strip()!r}")
        self.line = line


@dataclass(frozen=True)
class LuhmannID:
    """A hierarchical ID such as ``(1,1,a)``, derived from a filename on demand."""

    segments: tuple[str, ...]
    grammar: IdGrammar = field(default_factory=IdGrammar, compare=False, repr=False)

    def __post_init__(self) -> None:
        if not self.segments:
            raise ValueError("A Luhmann ID needs at least one segment")

    @classmethod
    def from_body(cls, body: str, grammar: IdGrammar) -> LuhmannID:
        return cls(grammar.split(body), grammar)

    @classmethod
    def parse(cls, text: str, grammar: IdGrammar) -> LuhmannID:
        """Parse user input like ``1,1,a`` or ``(1,1,a)``."""
        text = text.strip()
        if not text.startswith(grammar.prefix):
            text = grammar.prefix + text
        if not text.endswith(grammar.postfix):
            text = text + grammar.postfix
        match = grammar.bare_id_regex.fullmatch(text)
        if not match:
            raise ValueError(f"Not a valid Luhmann ID: {text!r}")
        return cls.from_body(match.group("body"), grammar)

    @property
    def depth(self) -> int:
        return len(self.segments)

    @property
    def is_root(self) -> bool:
        return self.depth == 1

    @property
    def parent(self) -> LuhmannID | None:
        if self.is_root:
            return None
        return LuhmannID(self.segments[:-1], self.grammar)

    @property
    def root(self) -> LuhmannID:
        return LuhmannID(self.segments[:1], self.grammar)

    @property
    def body(self) -> str:
        return self.grammar.join(self.segments)

    @property
    def stem(self) -> str:
        """Prefix and body without the postfix, e.g. ``(1,1``."""
        return self.grammar.prefix + self.body

    @property
    def raw(self) -> str:
        """The full delimited ID as it appears in a filename, e.g. ``(1,1)``."""
        return self.stem + self.grammar.postfix

    def __str__(self) -> str:
        return self.raw


def extract_id(text: str, grammar: IdGrammar) -> LuhmannID | None:
    """Return the Luhmann ID right after the primary ID of filename `text`, or None.

    Parenthesized words further on in the title are not IDs.
    """
    match = grammar.id_regex.search(text)
    if not match:
        return None
    return LuhmannID.from_body(match.group("body"), grammar)


def extract_id_from_cursor_line(lines: list[str], cursor: int, grammar: IdGrammar) -> LuhmannID | None:
    """Return the ID on the cursor line.

    An empty line (or a cursor outside the buffer) yields None. A line with
    text but no ID raises NotALuhmannNoteError.
    """
    if cursor < 0 or cursor >= len(lines):
        return None
    line = lines[cursor]
    if not line.strip():
        return None
    match = grammar.stem_regex.search(line)
    if not match:
        raise NotALuhmannNoteError(line)
    return LuhmannID.from_body(match.group("body"), grammar)
