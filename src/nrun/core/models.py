"""Core data models for n."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field, field_validator, model_validator


class PackageManager(str, Enum):
    """JavaScript package managers n knows how to drive.

    Declaration order is the detection priority when several lock files
    sit in the same directory.
    """

    NPM = "npm"
    YARN = "yarn"
    PNPM = "pnpm"
    BUN = "bun"

    @property
    def executable(self) -> str:
        """Name of the executable looked up on PATH."""
        return self.value

    @property
    def lock_files(self) -> tuple[str, ...]:
        """Lock filenames that identify this manager, most common first."""
        return _LOCK_FILES[self]


_LOCK_FILES = {
    PackageManager.NPM: ("package-lock.json", "npm-shrinkwrap.json"),
    PackageManager.YARN: ("yarn.lock",),
    PackageManager.PNPM: ("pnpm-lock.yaml",),
    PackageManager.BUN: ("bun.lockb", "bun.lock"),
}

# Order offered to the user when nothing was detected
FALLBACK_CANDIDATES = (
    PackageManager.PNPM,
    PackageManager.BUN,
    PackageManager.NPM,
    PackageManager.YARN,
)


@dataclass
class Detection:
    """
    Result of a successful lock file search.

    Attributes:
        manager: The package manager the lock file belongs to
        lock_file: Path of the lock file that matched
    """

    manager: PackageManager
    lock_file: Path


class Shortcut(BaseModel):
    """
    A first-token alias and what it expands to.

    Most shortcuts expand the same way for every manager; the ones that
    don't list the differing managers under ``overrides``.
    """

    token: str = Field(..., description="Alias typed by the user (e.g. 'd')")
    description: str = Field("", description="What the shortcut stands for")
    expansion: list[str] = Field(..., description="Default replacement tokens")
    overrides: dict[PackageManager, list[str]] = Field(
        default_factory=dict, description="Per-manager replacement tokens"
    )

    @field_validator("token")
    @classmethod
    def validate_token(cls, v):
        """Tokens are matched exactly, so whitespace would never match."""
        if not v or v != v.strip() or " " in v:
            raise ValueError(f"Invalid shortcut token: {v!r}")
        return v

    @model_validator(mode="after")
    def validate_expansions(self):
        """Ensure no expansion is empty."""
        if not self.expansion:
            raise ValueError(f"Shortcut '{self.token}' has an empty expansion")
        for manager, tokens in self.overrides.items():
            if not tokens:
                raise ValueError(
                    f"Shortcut '{self.token}' has an empty override for {manager.value}"
                )
        return self

    def expand_for(self, manager: PackageManager) -> list[str]:
        """Return the replacement tokens for ``manager``."""
        return list(self.overrides.get(manager, self.expansion))


class ShortcutTable(BaseModel):
    """All shortcuts, keyed by token."""

    shortcuts: dict[str, Shortcut] = Field(default_factory=dict)

    @classmethod
    def from_entries(cls, entries: list[dict]) -> "ShortcutTable":
        """Build a table from raw entries, rejecting duplicate tokens."""
        shortcuts = {}
        for entry in entries:
            shortcut = Shortcut(**entry)
            if shortcut.token in shortcuts:
                raise ValueError(f"Duplicate shortcut token: {shortcut.token!r}")
            shortcuts[shortcut.token] = shortcut
        return cls(shortcuts=shortcuts)

    def lookup(self, token: str) -> Shortcut | None:
        """Exact-token lookup."""
        return self.shortcuts.get(token)

    def __contains__(self, token: str) -> bool:
        return token in self.shortcuts

    def __len__(self) -> int:
        return len(self.shortcuts)
