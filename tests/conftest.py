"""Pytest configuration and fixtures."""

from pathlib import Path

import pytest

from luhmann.grammar import IdGrammar
from luhmann.navigator import TreeNavigator
from luhmann.sorting import Comparator
from luhmann.vault import VaultFiles
from luhmann.view import IndexView, StemFormatter

TREE_NOTES = [
    "1 (1).md",
    "2 (1,1).md",
    "3 (1,2).md",
    "4 (2).md",
    "5 (1,1,a).md",
    "6 (1,1,a,1).md",
    "7 plain note.md",
]


def write_notes(vault: Path, names: list[str]) -> Path:
    vault.mkdir(parents=True, exist_ok=True)
    for name in names:
        path = vault / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("", encoding="utf-8")
    return vault


@pytest.fixture
def grammar() -> IdGrammar:
    return IdGrammar()


@pytest.fixture
def tree_vault_path(tmp_path: Path) -> Path:
    """A vault with a small Luhmann tree and one note outside it."""
    return write_notes(tmp_path / "notes", TREE_NOTES)


@pytest.fixture
def vault(tree_vault_path: Path, grammar: IdGrammar) -> VaultFiles:
    return VaultFiles(tree_vault_path, grammar)


@pytest.fixture
def view() -> IndexView:
    return IndexView()


@pytest.fixture
def nav(grammar: IdGrammar, vault: VaultFiles, view: IndexView) -> TreeNavigator:
    return TreeNavigator(grammar, vault, view)


@pytest.fixture
def show(view: IndexView, grammar: IdGrammar):
    """Put a file set on the display, as an earlier command would have."""

    def _show(files: list[str], cursor: int = 0) -> IndexView:
        view.render_list(files, StemFormatter(), Comparator(grammar))
        view.cursor = cursor
        return view

    return _show


@pytest.fixture
def make_vault(tmp_path: Path):
    """Create a vault directory holding empty notes with the given names."""

    def _make(names: list[str], name: str = "vault") -> Path:
        return write_notes(tmp_path / name, names)

    return _make
