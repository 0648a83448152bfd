"""Command implementations behind the CLI. Each `run_*` returns an exit code."""

from __future__ import annotations

from pathlib import Path

from ..config import Config, load_config
from ..vault import VaultFiles


def open_vault(vault_path: Path) -> tuple[Config, VaultFiles]:
    config = load_config(vault_path)
    return config, VaultFiles(
        vault_path, config.grammar, extensions=config.extensions, recursive=config.recursive
    )
