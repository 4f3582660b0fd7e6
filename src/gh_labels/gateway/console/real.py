"""Real console implementation using rich tables and click prompts."""

from collections.abc import Callable
from typing import TypeVar

import click
from rich.console import Console as RichConsole
from rich.table import Table

from gh_labels.errors import PublicError
from gh_labels.gateway.console.abc import Console
from gh_labels.output import user_output

CANCELLED_MESSAGE = "Operation cancelled."

T = TypeVar("T")


class RealConsole(Console):
    """Production implementation prompting on the controlling terminal.

    Choices are rendered as a numbered table on stderr and answered by number.
    """

    def __init__(self) -> None:
        self._rich = RichConsole(stderr=True)

    def select(self, message: str, choices: list[str]) -> int:
        self._show_choices(message, choices)
        selection = _interruptible(
            lambda: click.prompt(
                "Select number",
                type=click.IntRange(1, len(choices)),
                err=True,
            )
        )
        return selection - 1

    def select_many(self, message: str, choices: list[str]) -> list[int]:
        self._show_choices(message, choices)
        while True:
            raw = _interruptible(
                lambda: click.prompt(
                    "Select numbers (comma-separated, 'all', or empty for none)",
                    default="",
                    show_default=False,
                    err=True,
                )
            )
            indexes = parse_multi_selection(raw, len(choices))
            if indexes is not None:
                return indexes
            user_output(click.style("Invalid selection: ", fg="red") + raw)

    def confirm(self, message: str, *, default: bool) -> bool:
        return _interruptible(lambda: click.confirm(message, default=default, err=True))

    def prompt_secret(self, message: str) -> str:
        # click re-prompts on empty input because no default is given
        return _interruptible(lambda: click.prompt(message, hide_input=True, err=True))

    def _show_choices(self, message: str, choices: list[str]) -> None:
        user_output(click.style(message, bold=True))

        table = Table(show_header=True, header_style="bold", box=None)
        table.add_column("#", style="dim", no_wrap=True)
        table.add_column("choice")
        for i, choice in enumerate(choices, 1):
            table.add_row(str(i), choice)

        self._rich.print(table)
        user_output("")


def parse_multi_selection(raw: str, count: int) -> list[int] | None:
    """Parse a multi-selection answer into zero-based indexes.

    Args:
        raw: Answer such as "1, 3", "all" or ""
        count: Number of available choices

    Returns:
        Sorted unique indexes, or None when the answer is not valid
    """
    answer = raw.strip().lower()
    if answer == "":
        return []
    if answer == "all":
        return list(range(count))

    indexes: set[int] = set()
    for part in answer.split(","):
        token = part.strip()
        if not token.isdigit():
            return None
        number = int(token)
        if number < 1 or number > count:
            return None
        indexes.add(number - 1)
    return sorted(indexes)


def _interruptible(ask: Callable[[], T]) -> T:
    try:
        return ask()
    except (KeyboardInterrupt, click.Abort):
        user_output("")
        raise PublicError(CANCELLED_MESSAGE) from None
