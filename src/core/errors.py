"""Runner error taxonomy.

The core raises these; only the CLI boundary turns them into a printed
diagnostic line and an exit code. `message` is the exact line shown to the
operator.
"""

from __future__ import annotations


class RunnerError(Exception):
    """Base class for every failure the runner reports to the operator."""

    exit_code = 1

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(RunnerError):
    """The path or inline code violates a policy limit. Nothing was executed."""


class ApplicationLoadError(RunnerError):
    """The host application's boot module could not be imported."""


class CodeError(RunnerError):
    """The executed code raised."""

    def __init__(self, message: str, *, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class CodeSyntaxError(CodeError):
    pass


class CodeNameError(CodeError):
    pass


class CodeExecutionError(CodeError):
    pass
