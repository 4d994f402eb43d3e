"""`runner` command: run a script or inline code inside the application."""

from __future__ import annotations

import code
import sys
from collections.abc import Callable
from typing import TextIO

import typer
from rich.console import Console

from adapters.app_loader import ImportlibApplicationLoader
from cli import formatter
from cli.ui_components import print_session_banner
from core.config import AppSettings
from core.domain.models import RunResult
from core.errors import RunnerError
from core.interfaces.app_loader import ApplicationLoader
from core.services import code_runner

HELP = "Run code in the context of the application (trusted operators only)."

EPILOG = (
    "Examples:\n\n"
    "  apprun runner path/to/script.py\n\n"
    "  apprun runner 'print(app.repos.users.count())'\n\n"
    "The code runs in-process with the application's privileges. "
    "It is not sandboxed."
)


def _typer_exit(code: int) -> None:
    raise typer.Exit(code=code)


class Runner:
    """Command object behind `apprun runner`.

    Every `RunnerError` stops here: it is printed as one line on `err` and
    turned into `command_exit(1)`. Nothing else escapes to the caller.
    """

    def __init__(
        self,
        *,
        out: TextIO | None = None,
        err: TextIO | None = None,
        command_exit: Callable[[int], None] = sys.exit,
        settings: AppSettings | None = None,
        loader: ApplicationLoader | None = None,
    ) -> None:
        self.out = out if out is not None else sys.stdout
        self.err = err if err is not None else sys.stderr
        self.command_exit = command_exit
        self.settings = settings or AppSettings()
        self.loader = loader or ImportlibApplicationLoader()

    def _console(self, stream: TextIO) -> Console:
        return Console(file=stream, soft_wrap=True, highlight=False, emoji=False)

    def call(self, code_or_path: str, *, interactive: bool = False) -> RunResult | None:
        try:
            result = code_runner.run(code_or_path, settings=self.settings, loader=self.loader)
        except RunnerError as exc:
            self.err.write(formatter.colorize(exc.message, "red", out=self.err) + "\n")
            self.command_exit(exc.exit_code)
            return None

        if interactive:
            self.interact(result)
        return result

    def interact(self, result: RunResult) -> None:
        """Open a Python console over the namespace left by the run."""

        print_session_banner(self._console(self.out), result)
        console = code.InteractiveConsole(locals=result.namespace)
        with code_runner.scoped_argv(result.session_argv):
            console.interact(banner="", exitmsg="")


def runner_command(
    ctx: typer.Context,
    code_or_path: str = typer.Argument(
        ...,
        metavar="CODE_OR_PATH",
        help="Path to a Python file or inline Python code to be executed",
    ),
    interactive: bool = typer.Option(
        False,
        "--interactive",
        "-i",
        help="Open an interactive console after the code has run",
    ),
) -> None:
    obj = ctx.obj if isinstance(ctx.obj, dict) else {}
    settings = obj.get("settings")
    Runner(command_exit=_typer_exit, settings=settings).call(
        code_or_path, interactive=interactive
    )


def register(app: typer.Typer) -> None:
    app.command(name="runner", help=HELP, epilog=EPILOG)(runner_command)
    app.command(name="run", help=f"Alias of `runner`. {HELP}", epilog=EPILOG)(runner_command)
