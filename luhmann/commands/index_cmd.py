"""Index listing commands - print Luhmann notes without an interactive session."""

from __future__ import annotations

import json
from pathlib import Path

from rich.console import Console
from rich.table import Table

from ..config import Config
from ..ids import LuhmannID, extract_id
from ..navigator import TreeNavigator
from ..queries import QueryBuilder
from ..sorting import sort_files
from ..vault import VaultFiles
from ..view import IndexView
from . import open_vault


def _print_files(files: list[str], vault: VaultFiles, *, title: str, output_json: bool) -> None:
    rows = []
    for f in files:
        luhmann_id = extract_id(Path(f).name, vault.grammar)
        rows.append(
            {
                "file": f,
                "primary_id": vault.primary_id(f),
                "luhmann_id": luhmann_id.raw if luhmann_id else None,
                "depth": luhmann_id.depth if luhmann_id else 0,
                "title": vault.title(f),
            }
        )

    if output_json:
        print(json.dumps(rows, indent=2))
        return

    console = Console()
    table = Table(title=title)
    table.add_column("luhmann_id", style="cyan", no_wrap=True)
    table.add_column("title")
    table.add_column("primary_id", style="dim")
    for row in rows:
        indent = "  " * max(row["depth"] - 1, 0)
        table.add_row(f"{indent}{row['luhmann_id'] or ''}", row["title"], row["primary_id"] or "")
    console.print(table)


def run_index(
    vault_path: Path,
    *,
    top: bool = False,
    depth: int | None = None,
    output_json: bool = False,
) -> int:
    """Print the Luhmann index: every ID-bearing note, or only the top level."""
    err = Console(stderr=True)
    config, vault = open_vault(vault_path)
    view = IndexView()
    nav = TreeNavigator(config.grammar, vault, view, recursive=config.recursive)

    files = nav.focus_top_level() if top else nav.focus_all()
    if depth is not None:
        try:
            files = nav.set_depth_window(depth)
        except ValueError as e:
            err.print(str(e), style="bold red")
            return 1

    if not files and not output_json:
        err.print("No Luhmann notes found.", style="yellow")
        return 0

    _print_files(files, vault, title="Luhmann index", output_json=output_json)
    return 0


def _parse(id_text: str, config: Config, err: Console) -> LuhmannID | None:
    try:
        return LuhmannID.parse(id_text, config.grammar)
    except ValueError as e:
        err.print(str(e), style="bold red")
        return None


def run_children(vault_path: Path, id_text: str, *, output_json: bool = False) -> int:
    """Print a note and its direct children."""
    err = Console(stderr=True)
    config, vault = open_vault(vault_path)
    luhmann_id = _parse(id_text, config, err)
    if luhmann_id is None:
        return 1

    pattern = QueryBuilder(config.grammar).descendants_and_siblings_of(luhmann_id)
    files = sort_files(vault.list_files(config.recursive, pattern), config.grammar)
    _print_files(files, vault, title=f"Children of {luhmann_id}", output_json=output_json)
    return 0


def run_parent(vault_path: Path, id_text: str, *, output_json: bool = False) -> int:
    """Print the parent of a note together with its siblings.

    For a root ID the whole subtree of the root is printed.
    """
    err = Console(stderr=True)
    config, vault = open_vault(vault_path)
    luhmann_id = _parse(id_text, config, err)
    if luhmann_id is None:
        return 1

    queries = QueryBuilder(config.grammar)
    if luhmann_id.parent is None:
        pattern = queries.exact_prefix_match(luhmann_id)
    else:
        pattern = queries.ancestor_query(luhmann_id.parent)
    files = sort_files(vault.list_files(config.recursive, pattern), config.grammar)
    _print_files(files, vault, title=f"Context of {luhmann_id}", output_json=output_json)
    return 0
