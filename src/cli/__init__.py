"""Command-line layer: Typer commands, Rich output and the text formatter."""
