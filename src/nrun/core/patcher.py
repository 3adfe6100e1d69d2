"""Shortcut expansion for the first command token."""

import logging
from functools import lru_cache
from pathlib import Path

import yaml
from pydantic import ValidationError

from .errors import ShortcutTableError
from .models import PackageManager, ShortcutTable

logger = logging.getLogger(__name__)

SHORTCUTS_FILE = Path(__file__).parent / "rules" / "shortcuts.yaml"

# First tokens that make the manager install dependencies
INSTALL_COMMANDS = frozenset({"install", "i", "add", "a", "ci"})


def load_shortcuts(path: Path = SHORTCUTS_FILE) -> ShortcutTable:
    """
    Load and validate a shortcut table from YAML.

    Args:
        path: YAML file with a top-level ``shortcuts`` list

    Returns:
        Validated ShortcutTable

    Raises:
        ShortcutTableError: If the file can't be read or an entry is invalid
    """
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ShortcutTableError(f"Failed to load shortcuts from {path}: {e}") from e

    entries = data.get("shortcuts", [])
    if not isinstance(entries, list):
        raise ShortcutTableError(f"'shortcuts' in {path} must be a list")

    try:
        table = ShortcutTable.from_entries(entries)
    except (ValidationError, ValueError, TypeError) as e:
        raise ShortcutTableError(f"Invalid shortcut in {path}: {e}") from e

    logger.debug(f"Loaded {len(table)} shortcuts from {path.name}")
    return table


@lru_cache(maxsize=1)
def default_shortcuts() -> ShortcutTable:
    """The bundled shortcut table, loaded once per process."""
    return load_shortcuts()


def expand(
    manager: PackageManager,
    args: list[str],
    table: ShortcutTable | None = None,
) -> list[str]:
    """
    Expand a shortcut in the first token of ``args``.

    Only the first token is looked up, and only by exact match. Unknown
    tokens are forwarded untouched so any real manager command still works.

    Examples (yarn):
        ["d"] -> ["dev"]
        ["i", "axios"] -> ["install", "axios"]
        ["why", "react"] -> ["why", "react"]

    Args:
        manager: Package manager the command is meant for
        args: Raw arguments given after ``n``
        table: Shortcut table to use (defaults to the bundled one)

    Returns:
        New argument list; empty if ``args`` was empty
    """
    if not args:
        return []

    if table is None:
        table = default_shortcuts()

    first, rest = args[0], list(args[1:])
    shortcut = table.lookup(first)
    if shortcut is None:
        return [first] + rest

    expanded = shortcut.expand_for(manager)
    logger.debug(f"Expanded '{first}' to {expanded} for {manager.value}")
    return expanded + rest


def is_install_command(args: list[str]) -> bool:
    """True if the (expanded) command installs dependencies."""
    return bool(args) and args[0] in INSTALL_COMMANDS
