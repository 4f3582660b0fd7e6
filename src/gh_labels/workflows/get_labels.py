"""Export the labels of a repository as a label template."""

from dataclasses import dataclass
from pathlib import Path

from gh_labels.context import LabelsContext
from gh_labels.errors import workflow_errors
from gh_labels.gateway.github.types import Label
from gh_labels.label_templates import labels_to_json, save_labels
from gh_labels.output import machine_output, success, user_output
from gh_labels.workflows.common import fetch_labels, select_repository


@dataclass(frozen=True)
class WriteToStdout:
    """Destination sentinel: print the JSON document instead of writing a file."""


LabelsDestination = Path | WriteToStdout | None


@dataclass(frozen=True)
class GetLabelsResult:
    """Fetched labels and where they went (path is None for stdout)."""

    repo: str
    labels: list[Label]
    path: Path | None


def default_labels_path(ctx: LabelsContext, repo: str) -> Path:
    """Template file a repository's labels are saved to, e.g. labels/acme-widgets.json."""
    return ctx.templates.templates_dir / f"{repo.replace('/', '-')}.json"


def get_labels_workflow(ctx: LabelsContext, destination: LabelsDestination) -> GetLabelsResult:
    """Fetch the labels of a chosen repository and emit them as JSON.

    Args:
        ctx: Application context
        destination: File to write, WriteToStdout(), or None for the default
            template path of the repository

    Returns:
        GetLabelsResult describing what was written
    """
    with workflow_errors("fetching labels"):
        repo = select_repository(ctx)
        labels = fetch_labels(ctx, repo)

        if isinstance(destination, WriteToStdout):
            machine_output(labels_to_json(labels))
            return GetLabelsResult(repo=repo, labels=labels, path=None)

        path = destination if destination is not None else default_labels_path(ctx, repo)
        if not path.is_absolute():
            path = ctx.cwd / path
        save_labels(path, labels)

        if not labels:
            user_output(f"No labels found in {repo}.")
        success(f"Saved {len(labels)} label(s) from {repo} to {path}")
        return GetLabelsResult(repo=repo, labels=labels, path=path)
