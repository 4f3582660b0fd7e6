from pathlib import Path

import click

from gh_labels.cli.errors import exit_on_error
from gh_labels.context import LabelsContext
from gh_labels.workflows.get_labels import LabelsDestination, WriteToStdout, get_labels_workflow


@click.command("get-labels")
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="File to write the labels to (default: <templates dir>/<owner>-<repo>.json)",
)
@click.option("--stdout", "to_stdout", is_flag=True, help="Print the labels JSON to stdout")
@click.pass_obj
def get_labels_cmd(ctx: LabelsContext, output: Path | None, to_stdout: bool) -> None:
    """Save all labels of a repository as a JSON label template.

    The saved file can be used directly as a template for add-labels.
    """
    if output is not None and to_stdout:
        raise click.UsageError("--output and --stdout cannot be used together")

    destination: LabelsDestination = WriteToStdout() if to_stdout else output
    with exit_on_error():
        get_labels_workflow(ctx, destination)
