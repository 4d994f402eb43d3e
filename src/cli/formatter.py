"""Formatting helpers for CLI output: ANSI colors and icons.

Every helper takes the stream it is going to be written to (`out`, defaults
to `sys.stdout`) and only decorates when that stream is a terminal, so piped
output stays plain.

`None` is accepted everywhere and never raises: `colorize` and `dim` echo it
back unchanged on plain streams, composed messages render it as "".
"""

from __future__ import annotations

import sys
from types import MappingProxyType
from typing import Mapping, TextIO

COLORS: Mapping[str, str] = MappingProxyType(
    {
        "reset": "\x1b[0m",
        "bold": "\x1b[1m",
        "green": "\x1b[32m",
        "blue": "\x1b[34m",
        "cyan": "\x1b[36m",
        "yellow": "\x1b[33m",
        "red": "\x1b[31m",
        "gray": "\x1b[90m",
    }
)

ICONS: Mapping[str, str] = MappingProxyType(
    {
        "create": "✓",
        "update": "↻",
        "info": "→",
        "warning": "⚠",
        "error": "✗",
        "success": "✓",
    }
)


def _stream(out: TextIO | None) -> TextIO:
    return sys.stdout if out is None else out


def is_tty(out: TextIO | None = None) -> bool:
    isatty = getattr(_stream(out), "isatty", None)
    if isatty is None:
        return False
    try:
        return bool(isatty())
    except (OSError, ValueError):
        # Closed or detached streams.
        return False


def _str(value: object) -> str:
    return "" if value is None else str(value)


def colorize(text, color: str | None, *, out: TextIO | None = None):
    """Wrap `text` in the escape code for `color` plus a reset.

    Plain streams get `text` back untouched. An unknown color adds no prefix.
    """

    if not is_tty(out):
        return text
    return f"{COLORS.get(color or '', '')}{_str(text)}{COLORS['reset']}"


def created(path, *, out: TextIO | None = None) -> str:
    icon = colorize(ICONS["create"], "green", out=out)
    label = colorize("create", "green", out=out)
    return f"  {icon} {label}  {_str(path)}"


def created_directory(path, *, out: TextIO | None = None) -> str:
    icon = colorize(ICONS["create"], "green", out=out)
    label = colorize("create directory", "green", out=out)
    return f"{icon} {label}  {_str(path)}"


def updated(path, *, out: TextIO | None = None) -> str:
    icon = colorize(ICONS["update"], "cyan", out=out)
    label = colorize("update", "cyan", out=out)
    return f"  {icon} {label}  {_str(path)}"


def info(text, *, out: TextIO | None = None) -> str:
    icon = colorize(ICONS["info"], "blue", out=out)
    return f"{icon} {_str(text)}"


def success(text, *, out: TextIO | None = None) -> str:
    icon = colorize(ICONS["success"], "green", out=out)
    return f"{icon} {_str(colorize(text, 'green', out=out))}"


def warning(text, *, out: TextIO | None = None) -> str:
    icon = colorize(ICONS["warning"], "yellow", out=out)
    label = colorize("warning", "yellow", out=out)
    return f"{icon} {label} {_str(text)}"


def error(text, *, out: TextIO | None = None) -> str:
    icon = colorize(ICONS["error"], "red", out=out)
    label = colorize("error", "red", out=out)
    return f"{icon} {label} {_str(text)}"


def header(text, *, out: TextIO | None = None) -> str:
    return f"\n{_str(colorize(text, 'bold', out=out))}"


def dim(text, *, out: TextIO | None = None):
    """Secondary text. No distinct styling yet: returns `text` as is."""

    del out
    return text
