"""Core configuration.

Why here:
- Centralizes environment variables (pydantic-settings) without leaking them
  into the CLI layer.
- The runner service and the application loader read limits and paths from a
  single typed contract.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.domain.models import ValidationLimits


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "apprun"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "apprun"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "apprun"
    return Path.home() / ".config" / "apprun"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Central runner configuration.

    Why pydantic-settings:
    - Typed validation at the edge (env vars) keeps the service free of parsing.
    - One configuration contract shared by the CLI, the loader and the tests.
    """

    model_config = SettingsConfigDict(
        env_prefix="APPRUN_",
        extra="ignore",
        case_sensitive=False,
        # Order: project first, then the user-wide config.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    app_root: Path | None = Field(
        default=None,
        description="Application directory. Scripts must live below it (defaults to the cwd).",
    )
    app_module: str | None = Field(
        default=None,
        description="Boot module imported before any code runs (e.g. 'myapp.prepare').",
    )

    max_file_size: int = Field(
        default=10 * 1024 * 1024,
        gt=0,
        description="Largest script accepted, in bytes.",
    )
    max_inline_code_length: int = Field(
        default=10_000,
        gt=0,
        description="Longest inline code string accepted, in characters.",
    )
    source_suffix: str = Field(
        default=".py",
        min_length=2,
        description="Only files with this extension are executed.",
    )

    log_level: str = Field(
        default="WARNING",
        description="Logging level used when --verbose is not given.",
    )

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level: {value!r}")
        return level

    def resolved_root(self) -> Path:
        root = self.app_root if self.app_root is not None else Path.cwd()
        return root.expanduser().resolve()

    def limits(self) -> ValidationLimits:
        return ValidationLimits(
            max_file_size=self.max_file_size,
            max_inline_code_length=self.max_inline_code_length,
            source_suffix=self.source_suffix,
        )
