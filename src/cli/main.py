"""apprun CLI (Typer).

Why a thin module:
- Only wires global options (version, logging, settings) and registers the
  commands; command behavior lives in `cli.runner` and `core.services`.
"""

from __future__ import annotations

import logging

import pydantic
import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from cli import runner as runner_cmd
from core.config import AppSettings

__version__ = "0.1.0"

app = typer.Typer(
    name="apprun",
    help="Run scripts and inline code inside a loaded application.",
    no_args_is_help=True,
    add_completion=False,
)

_err_console = Console(stderr=True)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"apprun {__version__}")
        raise typer.Exit(code=0)


def configure_logging(level: int | str) -> None:
    """Send log records to stderr through Rich.

    A root handler that is already installed (e.g. by a test harness) is kept.
    """

    root = logging.getLogger()
    if not root.handlers:
        root.addHandler(
            RichHandler(console=_err_console, show_path=False, rich_tracebacks=False)
        )
    root.setLevel(level)


@app.callback()
def app_callback(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    version: bool = typer.Option(False, "--version", callback=_version_callback, is_eager=True),
) -> None:
    del version
    try:
        settings = AppSettings()
    except pydantic.ValidationError as exc:
        _err_console.print(f"[red]Invalid configuration:[/red] {escape(str(exc))}", highlight=False)
        raise typer.Exit(code=2) from exc

    configure_logging(logging.DEBUG if verbose else settings.log_level.upper())
    ctx.obj = {"settings": settings}


runner_cmd.register(app)


def run() -> None:
    app(prog_name="apprun")
