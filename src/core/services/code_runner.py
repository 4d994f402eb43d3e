"""Script/inline-code execution inside the loaded application.

This module holds the whole runner flow so the CLI layer only deals with
printing and exit codes:

1. load the host application (delegated to an `ApplicationLoader`);
2. decide whether the argument names an existing file or is inline code;
3. validate it against `ValidationLimits` and abort on the first violation;
4. execute it in-process and translate failures into `CodeError`s.

Trusted operators only: executed code runs with the full privileges of the
process. The validations bound what is *accepted*, they do not sandbox what
runs.
"""

from __future__ import annotations

import builtins
import logging
import os
import sys
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from pathlib import Path
from typing import Any

from core.config import AppSettings
from core.domain.models import (
    ApplicationContext,
    RunResult,
    RunTarget,
    TargetKind,
    ValidationLimits,
)
from core.errors import (
    CodeExecutionError,
    CodeNameError,
    CodeSyntaxError,
    ValidationError,
)
from core.interfaces.app_loader import ApplicationLoader

logger = logging.getLogger(__name__)

INLINE_FILENAME = "<inline>"


def _entry_exists(candidate: str) -> bool:
    # Long inline snippets can exceed the OS path limit; that is "not a file".
    try:
        return os.path.exists(candidate)
    except (OSError, ValueError):
        return False


def _format_size(size: int) -> str:
    mib = 1024 * 1024
    if size % mib == 0:
        return f"{size // mib}MB"
    return f"{size:,} bytes"


def resolve_target(code_or_path: str) -> RunTarget:
    """Classify the argument: an existing filesystem entry, else inline code."""

    if code_or_path and _entry_exists(code_or_path):
        path = Path(os.path.abspath(code_or_path))
        logger.debug("Treating %r as a script file (%s)", code_or_path, path)
        return RunTarget(kind=TargetKind.FILE, source=code_or_path, path=path)

    logger.debug("Treating argument as inline code (%d chars)", len(code_or_path))
    return RunTarget(kind=TargetKind.INLINE, source=code_or_path)


def validate_file_path(path: Path, *, root: Path, limits: ValidationLimits) -> None:
    """Reject scripts with the wrong extension, outside `root`, or too large.

    Checks run in that order and the first failure raises `ValidationError`.
    Only regular files pass: a directory or other entry named `*.py` is not a
    script, and its size says nothing about the code that would run.
    Containment is decided on resolved paths (symlinks followed) and compared
    component-wise, so `/srv/app2` is not inside `/srv/app`.
    """

    if path.suffix != limits.source_suffix or not path.is_file():
        raise ValidationError(
            f"Error: Only Python files ({limits.source_suffix}) are allowed"
        )

    resolved = path.resolve()
    app_root = root.resolve()
    try:
        resolved.relative_to(app_root)
    except ValueError:
        raise ValidationError(
            "Error: File must be within the application directory"
        ) from None

    if resolved.stat().st_size > limits.max_file_size:
        raise ValidationError(
            f"Error: File too large (maximum {_format_size(limits.max_file_size)} allowed)"
        )


def validate_inline_code(code: str, *, limits: ValidationLimits) -> None:
    if len(code) > limits.max_inline_code_length:
        raise ValidationError(
            "Error: Inline code too long "
            f"(maximum {limits.max_inline_code_length:,} characters allowed)"
        )


@contextmanager
def scoped_argv(argv: Sequence[str]) -> Iterator[None]:
    """Expose `argv` as `sys.argv` for the duration of the block only.

    The previous list object is put back afterwards, whatever happens inside.
    """

    saved = sys.argv
    sys.argv = list(argv)
    try:
        yield
    finally:
        sys.argv = saved


@contextmanager
def translate_code_errors() -> Iterator[None]:
    """Map exceptions raised by executed code onto the runner taxonomy.

    `SystemExit` and `KeyboardInterrupt` are not `Exception`s and propagate.
    """

    try:
        yield
    except SyntaxError as exc:
        raise CodeSyntaxError(f"Syntax error in code: {exc}", cause=exc) from exc
    except (NameError, AttributeError) as exc:
        raise CodeNameError(f"Name error in code: {exc}", cause=exc) from exc
    except Exception as exc:
        raise CodeExecutionError(
            f"Error executing code: {type(exc).__name__}: {exc}", cause=exc
        ) from exc


def _globals_for(context: ApplicationContext) -> dict[str, Any]:
    namespace: dict[str, Any] = {
        "__name__": "__main__",
        "__builtins__": builtins,
    }
    namespace.update(context.namespace)
    return namespace


def execute_file(path: Path, *, context: ApplicationContext) -> dict[str, Any]:
    """Run the source of `path` as a top-level script and return its globals.

    The file's own bytes are compiled; nothing dispatches to a `__main__.py`
    inside a directory or zip archive.
    """

    namespace = _globals_for(context)
    namespace["__file__"] = str(path)
    logger.debug("Executing script %s", path)
    with translate_code_errors(), scoped_argv([str(path)]):
        compiled = compile(path.read_bytes(), str(path), "exec")
        exec(compiled, namespace)  # noqa: S102
    return namespace


def execute_inline(code: str, *, context: ApplicationContext) -> dict[str, Any]:
    """Compile and run `code` in a fresh namespace seeded from `context`.

    The code sees an empty `sys.argv`; the caller's list is restored after.
    """

    namespace = _globals_for(context)
    logger.debug("Executing inline code")
    with translate_code_errors(), scoped_argv(()):
        compiled = compile(code, INLINE_FILENAME, "exec")
        exec(compiled, namespace)  # noqa: S102
    return namespace


def run(
    code_or_path: str,
    *,
    settings: AppSettings,
    loader: ApplicationLoader,
) -> RunResult:
    """Load the application, then validate and execute `code_or_path`.

    Nothing is executed once a validation fails: the `ValidationError`
    propagates to the caller before any load/eval of the target.
    """

    context = loader.load(settings)
    limits = settings.limits()
    target = resolve_target(code_or_path)

    if target.is_file:
        assert target.path is not None
        validate_file_path(target.path, root=context.root, limits=limits)
        namespace = execute_file(target.path, context=context)
    else:
        validate_inline_code(code_or_path, limits=limits)
        namespace = execute_inline(code_or_path, context=context)

    logger.debug("Finished running %s target", target.kind.value)
    return RunResult(target=target, namespace=namespace, module_name=context.module_name)
