"""Remove labels from a repository."""

import logging

from gh_labels.context import LabelsContext
from gh_labels.errors import GitHubApiError, NetworkError, workflow_errors
from gh_labels.gateway.github.types import LabelNotFound
from gh_labels.output import error_line, success, user_output, warning
from gh_labels.prompts import choose_labels_to_remove
from gh_labels.workflows.common import (
    LabelBatchResult,
    describe_item_error,
    fetch_labels,
    select_repository,
)

logger = logging.getLogger(__name__)


def remove_labels_workflow(ctx: LabelsContext) -> LabelBatchResult:
    with workflow_errors("removing labels"):
        repo = select_repository(ctx)
        names = choose_labels_to_remove(ctx.console, fetch_labels(ctx, repo))

        user_output(f"\nRemoving {len(names)} label(s) from {repo}...")
        applied: list[str] = []
        skipped: list[str] = []
        failed: list[str] = []
        for name in names:
            try:
                result = ctx.github.delete_label(repo, name)
            except (GitHubApiError, NetworkError) as error:
                logger.debug("Deleting label %r failed", name, exc_info=error)
                error_line(f'Failed to remove label "{name}": {describe_item_error(error)}')
                failed.append(name)
                continue

            if isinstance(result, LabelNotFound):
                warning(f'Label "{name}" not found. Skipping...')
                skipped.append(name)
            else:
                success(f'Label "{name}" removed successfully!')
                applied.append(name)

        return LabelBatchResult(applied=applied, skipped=skipped, failed=failed)
