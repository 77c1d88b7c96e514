"""Rich console output for typeschema-cli.

Color is disabled by ``--no-color`` or the NO_COLOR environment variable.
"""

from __future__ import annotations

import json
import os
from typing import Any

from rich.console import Console


def create_console(no_color: bool = False) -> Console:
    """Create a Rich console, colorless when asked or when NO_COLOR is set."""
    plain = no_color or "NO_COLOR" in os.environ
    return Console(force_terminal=False if plain else None, no_color=plain)


console = create_console()


def set_no_color(no_color: bool) -> None:
    """Replace the module console, e.g. for ``--no-color``."""
    global console
    console = create_console(no_color=no_color)


def success(message: str) -> None:
    """Print ``message`` after a green check mark."""
    console.print(f"[green]✓[/green] {message}")


def error(message: str) -> None:
    """Print ``message`` after a red cross."""
    console.print(f"[red]✗[/red] {message}")


def print_json(data: dict[str, Any], *, indent: int | None = 2) -> None:
    """Print a schema as highlighted JSON.

    Args:
        data: Encoded schema.
        indent: Indentation, ``None`` for a single line.
    """
    console.print_json(json.dumps(data), indent=indent)
