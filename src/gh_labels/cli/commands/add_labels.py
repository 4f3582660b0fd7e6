import click

from gh_labels.cli.errors import exit_on_error
from gh_labels.context import LabelsContext
from gh_labels.workflows.add_labels import add_labels_workflow


@click.command("add-labels")
@click.pass_obj
def add_labels_cmd(ctx: LabelsContext) -> None:
    """Add labels from a label template to a repository.

    Templates are the bundled "default" set plus every *.json file in the
    templates directory (./labels, or GH_LABELS_TEMPLATES_DIR).
    """
    with exit_on_error():
        add_labels_workflow(ctx)
