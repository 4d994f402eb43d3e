"""Domain models (Pydantic v2).

Why Pydantic in the domain:
- Limits and targets are validated once, at construction, so the service can
  trust them.
- Frozen models make the "single-call scope" explicit: nothing here is
  mutated after it is built.

Note:
- These models describe *what* is going to run, not *how* it runs.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class ValidationLimits(BaseModel):
    """Policy limits applied before any code is executed."""

    model_config = ConfigDict(frozen=True)

    max_file_size: int = Field(
        default=10 * 1024 * 1024,
        gt=0,
        description="Largest accepted script, in bytes (10 MiB).",
    )
    max_inline_code_length: int = Field(
        default=10_000,
        gt=0,
        description="Longest accepted inline code string, in characters.",
    )
    source_suffix: str = Field(
        default=".py",
        min_length=2,
        description="Required extension for script files.",
    )


class TargetKind(str, Enum):
    FILE = "file"
    INLINE = "inline"


class RunTarget(BaseModel):
    """What the operator asked to run.

    The CLI argument is ambiguous: it is either a path to an existing file or
    literal source code. `kind` records which interpretation was chosen.
    """

    model_config = ConfigDict(frozen=True)

    kind: TargetKind
    source: str = Field(
        ...,
        description="Raw argument as given on the command line.",
    )
    path: Path | None = Field(
        default=None,
        description="Absolute path for file targets, None for inline code.",
    )

    @property
    def is_file(self) -> bool:
        return self.kind is TargetKind.FILE


@dataclass
class ApplicationContext:
    """The loaded host application, as seen by executed code."""

    root: Path
    module_name: str | None = None
    namespace: dict[str, Any] = field(default_factory=dict)


@dataclass
class RunResult:
    """Outcome of a successful run.

    `session_argv` is the argument list handed to any interactive session
    started afterwards; it is always empty.
    """

    target: RunTarget
    namespace: dict[str, Any]
    module_name: str | None = None
    session_argv: tuple[str, ...] = ()
