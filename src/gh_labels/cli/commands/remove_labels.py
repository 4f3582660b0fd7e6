import click

from gh_labels.cli.errors import exit_on_error
from gh_labels.context import LabelsContext
from gh_labels.workflows.remove_labels import remove_labels_workflow


@click.command("remove-labels")
@click.pass_obj
def remove_labels_cmd(ctx: LabelsContext) -> None:
    """Remove selected labels from a repository."""
    with exit_on_error():
        remove_labels_workflow(ctx)
