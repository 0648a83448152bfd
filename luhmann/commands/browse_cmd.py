"""Interactive index view driven by single keystrokes."""

from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console

from ..ids import NotALuhmannNoteError
from ..navigator import TreeNavigator
from ..vault import VaultFiles
from ..view import IndexView
from . import open_vault
from .find_cmd import open_note

HELP = "j/k move  l forward  h back  u unfold  t top  a all  c current  1-9 depth  o open  q quit"

UP_KEYS = {"k", "\x1b[A"}
DOWN_KEYS = {"j", "\x1b[B"}
QUIT_KEYS = {"q", "\x1b"}

COMMANDS = {
    "l": "step_forward",
    "\r": "step_forward",
    "\n": "step_forward",
    "\x1b[C": "step_forward",
    "h": "step_back",
    "\x1b[D": "step_back",
    "u": "unfold",
    "t": "focus_top_level",
    "a": "focus_all",
    "c": "jump_to_current_note",
}


def handle_key(key: str, nav: TreeNavigator, view: IndexView, vault: VaultFiles) -> bool:
    """Apply one keystroke. Returns False when the session should end.

    NotALuhmannNoteError propagates; the display is left as it was.
    """
    if key in QUIT_KEYS:
        return False
    if key in UP_KEYS:
        view.move(-1)
    elif key in DOWN_KEYS:
        view.move(1)
    elif key in COMMANDS:
        getattr(nav, COMMANDS[key])()
    elif len(key) == 1 and key in "123456789":
        nav.set_depth_window(int(key))
    elif key == "o":
        filename = view.current_file()
        if filename:
            open_note(vault, filename)
    return True


def run_browse(vault_path: Path, *, top: bool = False) -> int:
    console = Console()
    config, vault = open_vault(vault_path)
    view = IndexView(title=f"Luhmann index - {vault_path.name}")
    nav = TreeNavigator(config.grammar, vault, view, recursive=config.recursive)

    if top:
        nav.focus_top_level()
    else:
        nav.focus_all()

    message = ""
    running = True
    while running:
        console.clear()
        view.render(console)
        console.print(HELP, style="dim", highlight=False)
        if message:
            console.print(message, style="bold red", highlight=False)
            message = ""

        try:
            key = click.getchar()
        except (KeyboardInterrupt, EOFError):
            break
        try:
            running = handle_key(key, nav, view, vault)
        except NotALuhmannNoteError as e:
            message = str(e)

    return 0
