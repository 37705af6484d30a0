"""Output helpers for CLI commands.

user_output goes to stderr and carries progress, results and prompts meant
for a person. machine_output goes to stdout and carries data that may be
piped elsewhere, such as the contents of a doc.
"""

from typing import Any

import click
from rich.console import Console


def user_output(message: Any = "", nl: bool = True) -> None:
    """Write a message for the user to stderr."""
    click.echo(message, nl=nl, err=True)


def machine_output(message: Any = "", nl: bool = True) -> None:
    """Write data to stdout."""
    click.echo(message, nl=nl)


def success(message: str) -> str:
    return click.style(f"✓ {message}", fg="green")


def warning(message: str) -> str:
    return click.style(message, fg="yellow")


def dim(message: str) -> str:
    return click.style(message, dim=True)


def table_console() -> Console:
    """Console for rich tables, written to stderr like other user output."""
    return Console(stderr=True, highlight=False, soft_wrap=False)


_CATALOG_COLORS = {
    "green": "green",
    "blue": "blue",
    "yellow": "yellow",
    "red": "red",
    "magenta": "magenta",
    "purple": "magenta",
    "cyan": "cyan",
    "orange": "orange1",
}


def catalog_style(color: str | None, fallback: str = "green") -> str:
    """Rich style for a catalog entry's color, ignoring colors we don't know."""
    if color is None:
        return fallback
    return _CATALOG_COLORS.get(color, fallback)
