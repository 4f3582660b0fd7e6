"""Add labels from a template to a repository."""

import logging

from gh_labels.context import LabelsContext
from gh_labels.errors import GitHubApiError, NetworkError, workflow_errors
from gh_labels.gateway.github.types import LabelAlreadyExists
from gh_labels.output import error_line, success, user_output, warning
from gh_labels.prompts import choose_labels_to_add, choose_template
from gh_labels.workflows.common import (
    LabelBatchResult,
    describe_item_error,
    select_repository,
)

logger = logging.getLogger(__name__)


def add_labels_workflow(ctx: LabelsContext) -> LabelBatchResult:
    """Create the chosen template labels in a chosen repository.

    Labels that already exist are skipped with a warning. A failure on one
    label is reported and the remaining labels are still processed.
    """
    with workflow_errors("adding labels"):
        repo = select_repository(ctx)
        template_name = choose_template(ctx.console, ctx.templates.list_templates())
        template_labels = ctx.templates.load_template(template_name)
        selected = choose_labels_to_add(ctx.console, template_labels)

        user_output(f"\nAdding {len(selected)} label(s) to {repo}...")
        applied: list[str] = []
        skipped: list[str] = []
        failed: list[str] = []
        for label in selected:
            try:
                result = ctx.github.create_label(repo, label)
            except (GitHubApiError, NetworkError) as error:
                logger.debug("Creating label %r failed", label.name, exc_info=error)
                error_line(f'Failed to add label "{label.name}": {describe_item_error(error)}')
                failed.append(label.name)
                continue

            if isinstance(result, LabelAlreadyExists):
                warning(f'Label "{label.name}" already exists. Skipping...')
                skipped.append(label.name)
            else:
                success(f'Label "{label.name}" added successfully!')
                applied.append(label.name)

        return LabelBatchResult(applied=applied, skipped=skipped, failed=failed)
