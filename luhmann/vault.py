"""Vault file service: listing notes, the active note and candidate labels."""

from __future__ import annotations

import logging
import re
from pathlib import Path

import frontmatter

from .grammar import IdGrammar
from .ids import extract_id

logger = logging.getLogger(__name__)

DEFAULT_EXTENSIONS = (".md", ".org", ".txt")


class VaultFiles:
    """Lists note files in a vault directory; the file system is the only state."""

    def __init__(
        self,
        path: Path,
        grammar: IdGrammar,
        *,
        extensions: tuple[str, ...] = DEFAULT_EXTENSIONS,
        recursive: bool = False,
    ):
        self.path = path
        self.grammar = grammar
        self.extensions = tuple(e.lower() for e in extensions)
        self.recursive = recursive  # scope of the latest-modified lookup
        self.active_note: str | None = None  # relative filename of the last opened note

    def _iter_notes(self, recursive: bool):
        candidates = self.path.rglob("*") if recursive else self.path.iterdir()
        for p in candidates:
            if not p.is_file() or p.suffix.lower() not in self.extensions:
                continue
            rel = p.relative_to(self.path)
            if any(part.startswith(".") for part in rel.parts):
                continue
            yield p

    def list_files(self, recursive: bool, pattern: str) -> list[str]:
        """Return vault-relative paths of notes whose filename matches `pattern`."""
        regex = re.compile(pattern)
        files = [p.relative_to(self.path).as_posix() for p in self._iter_notes(recursive) if regex.search(p.name)]
        logger.debug("Scanned %s for %r: %d files", self.path, pattern, len(files))
        return files

    def primary_id(self, filename: str) -> str | None:
        match = re.match(self.grammar.primary_id_pattern, Path(filename).name)
        return match.group(0) if match else None

    def current_note_id(self) -> str | None:
        """Primary ID of the last opened note, else of the most recently modified one."""
        if self.active_note:
            return self.primary_id(self.active_note)

        latest: Path | None = None
        for p in self._iter_notes(self.recursive):
            if latest is None or p.stat().st_mtime > latest.stat().st_mtime:
                latest = p
        return self.primary_id(latest.name) if latest else None

    def resolve(self, filename: str) -> Path:
        return self.path / filename

    def title(self, filename: str) -> str:
        """Title from frontmatter, else the filename text after the Luhmann ID."""
        path = self.resolve(filename)
        try:
            post = frontmatter.load(path)
        except Exception as e:
            logger.warning("Failed to read frontmatter of %s: %s", filename, e)
        else:
            title = post.metadata.get("title")
            if isinstance(title, str) and title.strip():
                return title.strip()

        stem = Path(filename).stem
        luhmann_id = extract_id(stem, self.grammar)
        if luhmann_id:
            return stem.split(luhmann_id.raw, 1)[1].strip()
        primary = self.primary_id(stem)
        return stem[len(primary):].strip() if primary else stem


class CandidateFormatter:
    """Label notes as ``<luhmann id>  <title>  [primary id]`` for selection lists."""

    def __init__(self, vault: VaultFiles):
        self.vault = vault

    def format(self, files: list[str]) -> list[str]:
        labels = []
        for f in files:
            luhmann_id = extract_id(Path(f).name, self.vault.grammar)
            primary = self.vault.primary_id(f) or ""
            parts = [luhmann_id.raw if luhmann_id else "", self.vault.title(f), f"[{primary}]" if primary else ""]
            labels.append("  ".join(p for p in parts if p))
        return labels


def format_candidates(vault: VaultFiles, files: list[str]) -> list[str]:
    return CandidateFormatter(vault).format(files)
