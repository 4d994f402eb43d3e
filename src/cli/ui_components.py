"""UI components for the CLI (Rich).

Why separate components:
- Keeps command logic apart from presentation details.
- Lets the runner and future commands share the same panels.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from core.domain.models import RunResult


def print_session_banner(console: Console, result: RunResult) -> None:
    """Print the banner shown before an interactive session.

    Lists the names preloaded from the run so the operator knows what is in
    scope.
    """

    title = Text("apprun console", style="bold cyan")
    source = result.target.path or "inline code"
    subtitle = Text(f"after {source}", style="dim")

    names = sorted(k for k in result.namespace if not k.startswith("__"))
    body = Text.assemble(title, "\n", subtitle)
    if result.module_name:
        body.append(f"\napplication: {result.module_name}", style="dim")
    if names:
        body.append("\nin scope: " + ", ".join(names[:12]))
        if len(names) > 12:
            body.append(f" (+{len(names) - 12} more)", style="dim")

    console.print(Panel(Align.left(body), border_style="cyan", padding=(0, 2)))
