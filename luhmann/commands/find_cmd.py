"""Open a note by its Luhmann ID, picked from a filtered, grouped candidate list."""

from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from ..ids import extract_id
from ..queries import QueryBuilder
from ..sorting import sort_files
from ..vault import CandidateFormatter, VaultFiles
from . import open_vault


def fuzzy_match(query: str, label: str) -> bool:
    """True when every whitespace-separated term is a subsequence of `label`."""
    label = label.lower()
    for term in query.lower().split():
        pos = 0
        for ch in term:
            pos = label.find(ch, pos)
            if pos < 0:
                return False
            pos += 1
    return True


def group_by_root(files: list[str], vault: VaultFiles) -> dict[str, list[str]]:
    """Group already-sorted files by the first segment of their ID."""
    groups: dict[str, list[str]] = {}
    for f in files:
        luhmann_id = extract_id(Path(f).name, vault.grammar)
        root = luhmann_id.root.raw if luhmann_id else ""
        groups.setdefault(root, []).append(f)
    return groups


def open_note(vault: VaultFiles, filename: str) -> None:
    vault.active_note = filename
    click.edit(filename=str(vault.resolve(filename)))


def run_find(vault_path: Path, query: str = "", *, print_only: bool = False) -> int:
    console = Console()
    err = Console(stderr=True)
    config, vault = open_vault(vault_path)

    files = sort_files(
        vault.list_files(config.recursive, QueryBuilder(config.grammar).all_luhmann_files()),
        config.grammar,
    )
    formatter = CandidateFormatter(vault)
    candidates = [(f, label) for f, label in zip(files, formatter.format(files)) if fuzzy_match(query, label)]

    if not candidates:
        err.print(f"No Luhmann note matches {query!r}", style="bold red")
        return 1

    labels = dict(candidates)
    if len(candidates) == 1 and not print_only:
        open_note(vault, candidates[0][0])
        return 0

    numbered: list[str] = []
    for root, group in group_by_root([f for f, _ in candidates], vault).items():
        console.print(f"[bold]{escape(root) or '-'}[/bold]", highlight=False)
        for f in group:
            numbered.append(f)
            console.print(f"  [dim]{len(numbered):>3}[/dim] {escape(labels[f])}", highlight=False)

    if print_only:
        return 0

    choice = click.prompt("Open note", type=click.IntRange(1, len(numbered)))
    open_note(vault, numbered[choice - 1])
    return 0
