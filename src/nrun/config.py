"""Environment-based settings.

n forwards every argument to the package manager, so its own knobs
live in ``N_*`` environment variables instead of flags.
"""

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .core.detector import DEFAULT_SEARCH_DEPTH

_TRUTHY = {"1", "true", "yes", "on"}


class Settings(BaseSettings):
    """Runtime settings for n.

    Loaded from environment variables (``N_LOG_LEVEL``, ``N_SEARCH_DEPTH``,
    ``N_QUIET``), falling back to the defaults below.
    """

    model_config = SettingsConfigDict(
        env_prefix="N_",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = Field(default="WARNING", description="Logging level name")
    search_depth: int = Field(
        default=DEFAULT_SEARCH_DEPTH, ge=0, description="Ancestor directories to search"
    )
    quiet: bool = Field(default=False, description="Suppress command echo")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Accept any standard level name, case-insensitively."""
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v!r}")
        return level

    @field_validator("quiet", mode="before")
    @classmethod
    def validate_quiet(cls, v):
        """Interpret common truthy strings; anything else is off."""
        if isinstance(v, str):
            return v.strip().lower() in _TRUTHY
        return v
