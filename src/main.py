"""Run script.

Why it exists:
- Allows running the CLI with `python -m main` during development.
- Keeps a simple entry point next to the installed `apprun` script.
"""

from __future__ import annotations

import sys

# Rich panels and operator scripts print non-ASCII text; Windows consoles default to cp1252.
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8")
    sys.stderr.reconfigure(encoding="utf-8")

from cli.main import run


def main() -> None:
    run()


if __name__ == "__main__":
    main()
