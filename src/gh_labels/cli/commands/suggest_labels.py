import click

from gh_labels.cli.commands.options import build_selective_options, selective_options
from gh_labels.cli.errors import exit_on_error
from gh_labels.context import LabelsContext
from gh_labels.workflows.suggest_pr import suggest_pr_workflow


@click.command("suggest-labels")
@selective_options
@click.pass_obj
def suggest_labels_cmd(
    ctx: LabelsContext,
    labels_only: bool,
    description_only: bool,
    no_labels: bool,
    no_description: bool,
) -> None:
    """Suggest labels and a description for an open pull request using AI.

    Requires OPENAI_API_KEY.
    """
    options = build_selective_options(
        labels_only=labels_only,
        description_only=description_only,
        no_labels=no_labels,
        no_description=no_description,
    )
    with exit_on_error():
        suggest_pr_workflow(ctx, options)
