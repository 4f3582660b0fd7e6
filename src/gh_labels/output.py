"""User-facing terminal output.

Human-readable lines go to stderr so stdout stays clean for machine output
(e.g. `gh-labels get-labels --stdout`).
"""

from collections.abc import Iterator
from contextlib import contextmanager

import click
from rich.console import Console


def user_output(message: str = "", nl: bool = True) -> None:
    """Write a line for the human operator to stderr."""
    click.echo(message, err=True, nl=nl)


def machine_output(message: str) -> None:
    """Write structured output to stdout."""
    click.echo(message)


def success(message: str) -> None:
    user_output(click.style("✓ ", fg="green") + message)


def warning(message: str) -> None:
    user_output(click.style("⚠ ", fg="yellow") + message)


def error_line(message: str) -> None:
    user_output(click.style("Error: ", fg="red") + message)


def heading(message: str) -> None:
    user_output(click.style(message, bold=True))


@contextmanager
def spinner(message: str) -> Iterator[None]:
    """Show a spinner on stderr while the block runs."""
    console = Console(stderr=True)
    with console.status(message):
        yield
