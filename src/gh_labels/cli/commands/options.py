"""Options shared by several commands."""

from collections.abc import Callable
from typing import TypeVar

import click

from gh_labels.selective import SelectiveOptions

F = TypeVar("F", bound=Callable[..., object])


def selective_options(fn: F) -> F:
    """Add --labels-only/--description-only/--no-labels/--no-description."""
    decorators = [
        click.option("--labels-only", is_flag=True, help="Only apply suggested labels"),
        click.option(
            "--description-only", is_flag=True, help="Only apply the suggested description"
        ),
        click.option("--no-labels", is_flag=True, help="Do not apply suggested labels"),
        click.option(
            "--no-description", is_flag=True, help="Do not apply the suggested description"
        ),
    ]
    for decorator in reversed(decorators):
        fn = decorator(fn)
    return fn


def build_selective_options(
    *, labels_only: bool, description_only: bool, no_labels: bool, no_description: bool
) -> SelectiveOptions:
    return SelectiveOptions(
        labels_only=labels_only,
        description_only=description_only,
        no_labels=no_labels,
        no_description=no_description,
    )
