"""CLI entrypoint for luhmann."""

import logging
import sys
from pathlib import Path

import click
from rich.logging import RichHandler

from . import __version__
from .config import CONFIG_FILENAME, load_config
from .grammar import GrammarError


def _auto_detect_vault(start: Path) -> Path | None:
    """Find a vault by walking up from `start`: a folder holding .luhmann.toml, else ./notes."""
    cur = start.resolve()
    for p in (cur, *cur.parents):
        if (p / CONFIG_FILENAME).is_file():
            return p
        candidate = p / "notes"
        if candidate.is_dir():
            return candidate
    return None


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
        force=True,
    )


@click.group()
@click.version_option(__version__, prog_name="luhmann")
@click.option(
    "--vault",
    "-v",
    type=click.Path(exists=False, file_okay=False, dir_okay=True, path_type=Path),
    default=None,
    help="Path to the notes directory (defaults to auto-detected vault or ./notes)",
)
@click.option("--verbose", is_flag=True, help="Log queries and navigation fallbacks")
@click.pass_context
def cli(ctx: click.Context, vault: Path | None, verbose: bool) -> None:
    """luhmann - Navigate notes by hierarchical Luhmann IDs.

    Notes are files named "<primary id> (<luhmann id>) <title>", for example
    "2018-07-09-2115 (1,1,a) Some title.md".
    """
    _configure_logging(verbose)
    ctx.ensure_object(dict)
    if vault is None:
        detected = _auto_detect_vault(Path.cwd())
        if detected is None:
            raise click.ClickException("Vault not found. Pass --vault /path/to/notes or run from inside one.")
        vault = detected

    if not vault.exists() or not vault.is_dir():
        raise click.BadParameter(f"Directory '{vault}' does not exist.", param_hint="--vault / -v")

    try:
        load_config(vault)
    except GrammarError as e:
        raise click.ClickException(f"Invalid grammar in {CONFIG_FILENAME}: {e}") from e
    except ValueError as e:
        raise click.ClickException(f"Invalid {CONFIG_FILENAME}: {e}") from e

    ctx.obj["vault"] = vault.resolve()


@cli.command()
@click.option("--top", is_flag=True, help="Only show top-level notes")
@click.option(
    "--depth",
    type=click.IntRange(1, 9),
    default=None,
    help="Only show notes whose ID has exactly this many levels",
)
@click.option("--json", "output_json", is_flag=True, help="Output results as JSON")
@click.pass_context
def index(ctx: click.Context, top: bool, depth: int | None, output_json: bool) -> None:
    """Show the Luhmann index, sorted by ID.

    Examples:

        luhmann index

        luhmann index --top

        luhmann index --depth 2 --json
    """
    from .commands.index_cmd import run_index

    sys.exit(run_index(ctx.obj["vault"], top=top, depth=depth, output_json=output_json))


@cli.command()
@click.argument("luhmann_id")
@click.option("--json", "output_json", is_flag=True, help="Output results as JSON")
@click.pass_context
def children(ctx: click.Context, luhmann_id: str, output_json: bool) -> None:
    """Show a note and its direct children (e.g. luhmann children 1,1)."""
    from .commands.index_cmd import run_children

    sys.exit(run_children(ctx.obj["vault"], luhmann_id, output_json=output_json))


@cli.command()
@click.argument("luhmann_id")
@click.option("--json", "output_json", is_flag=True, help="Output results as JSON")
@click.pass_context
def parent(ctx: click.Context, luhmann_id: str, output_json: bool) -> None:
    """Show the parent of a note and its siblings (e.g. luhmann parent 1,1,a)."""
    from .commands.index_cmd import run_parent

    sys.exit(run_parent(ctx.obj["vault"], luhmann_id, output_json=output_json))


@cli.command()
@click.argument("query", nargs=-1)
@click.option("--print", "print_only", is_flag=True, help="List matching notes instead of opening one")
@click.pass_context
def find(ctx: click.Context, query: tuple[str, ...], print_only: bool) -> None:
    """Open a note by Luhmann ID or title.

    Candidates are grouped by top-level ID and sorted by ID. Each word of
    QUERY must appear, in order, in the candidate label.

    Examples:

        luhmann find 1,2

        luhmann find memory --print
    """
    from .commands.find_cmd import run_find

    sys.exit(run_find(ctx.obj["vault"], " ".join(query), print_only=print_only))


@cli.command()
@click.option("--top", is_flag=True, help="Start from the top-level notes")
@click.pass_context
def browse(ctx: click.Context, top: bool) -> None:
    """Browse the Luhmann tree interactively.

    \b
    j/k    move the cursor
    l      forward: show the note's children
    h      back: show the parent and its siblings
    u      unfold the whole first level of the branch
    t / a  top-level notes / all Luhmann notes
    c      jump to the current note
    1-9    only show notes of that depth
    o      open the note under the cursor
    q      quit
    """
    from .commands.browse_cmd import run_browse

    sys.exit(run_browse(ctx.obj["vault"], top=top))


def main() -> None:
    """Main entrypoint."""
    cli()


if __name__ == "__main__":
    main()
