"""Vault configuration from an optional ``.luhmann.toml`` at the vault root.

    [grammar]
    prefix = "("
    postfix = ")"
    delimiter = ","
    primary_id_pattern = "[0-9]{4}-[0-9]{2}-[0-9]{2}-[0-9]{4}"

    [vault]
    extensions = [".md", ".org"]
    recursive = false
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .grammar import IdGrammar
from .vault import DEFAULT_EXTENSIONS

CONFIG_FILENAME = ".luhmann.toml"


@dataclass(frozen=True)
class Config:
    grammar: IdGrammar = field(default_factory=IdGrammar)
    extensions: tuple[str, ...] = DEFAULT_EXTENSIONS
    recursive: bool = False


def _coerce_dict(value: Any) -> dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _string(section: dict[str, Any], key: str, default: str) -> str:
    value = section.get(key, default)
    if not isinstance(value, str):
        raise ValueError(f"{key} must be a string")
    return value


def parse_config(data: dict[str, Any]) -> Config:
    """Build a Config from parsed TOML data. Raises ValueError on bad values."""
    defaults = IdGrammar()
    g = _coerce_dict(data.get("grammar"))
    grammar = IdGrammar(
        prefix=_string(g, "prefix", defaults.prefix),
        postfix=_string(g, "postfix", defaults.postfix),
        delimiter=_string(g, "delimiter", defaults.delimiter),
        primary_id_pattern=_string(g, "primary_id_pattern", defaults.primary_id_pattern),
    )

    v = _coerce_dict(data.get("vault"))
    extensions = v.get("extensions", list(DEFAULT_EXTENSIONS))
    if not isinstance(extensions, list) or not all(isinstance(e, str) for e in extensions):
        raise ValueError("extensions must be a list of strings")
    extensions = tuple(e if e.startswith(".") else f".{e}" for e in extensions)

    recursive = v.get("recursive", False)
    if not isinstance(recursive, bool):
        raise ValueError("recursive must be true or false")

    return Config(grammar=grammar, extensions=extensions, recursive=recursive)


def load_config(vault_path: Path) -> Config:
    """Load the vault's config, or defaults when it has none."""
    import tomllib

    config_path = vault_path / CONFIG_FILENAME
    if not config_path.exists():
        return Config()
    data = tomllib.loads(config_path.read_text(encoding="utf-8"))
    return parse_config(data)
