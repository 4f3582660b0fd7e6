"""AI-assisted labels and description for a pull request."""

from gh_labels.context import LabelsContext
from gh_labels.errors import PublicError, workflow_errors
from gh_labels.output import spinner
from gh_labels.prompts import choose_pull_request
from gh_labels.selective import SelectiveOptions, resolve_apply_scope
from gh_labels.workflows.common import (
    EntityUpdate,
    SuggestionOutcome,
    fetch_labels,
    find_repository_template,
    normalize_suggestion,
    review_and_apply,
    select_repository,
    warn_missing_template,
)

PULL_REQUEST_TEMPLATE_PATHS = [
    ".github/PULL_REQUEST_TEMPLATE.md",
    ".github/pull_request_template.md",
    "PULL_REQUEST_TEMPLATE.md",
    "pull_request_template.md",
]

NO_OPEN_PULL_REQUESTS_MESSAGE = "No open pull requests found in this repository."


def suggest_pr_workflow(ctx: LabelsContext, options: SelectiveOptions) -> SuggestionOutcome:
    """Suggest labels and a description for an open pull request and apply them.

    The flag combination is validated before any request is made. Only the
    in-scope parts of the suggestion are shown and applied.
    """
    with workflow_errors("suggesting labels"):
        scope = resolve_apply_scope(options)

        repo = select_repository(ctx)
        with spinner("Fetching open pull requests..."):
            pull_requests = ctx.github.list_open_pull_requests(repo)
        if not pull_requests:
            raise PublicError(NO_OPEN_PULL_REQUESTS_MESSAGE)
        number = choose_pull_request(ctx.console, pull_requests)

        labels = fetch_labels(ctx, repo)
        with spinner(f"Fetching pull request #{number}..."):
            details = ctx.github.get_pull_request(repo, number)
        with spinner("Checking for pull request template..."):
            template = find_repository_template(ctx.github, repo, PULL_REQUEST_TEMPLATE_PATHS)
        if template is None:
            warn_missing_template("pull request")

        with spinner("Analyzing pull request with AI..."):
            suggestion = ctx.suggestions.suggest_pr_content(details, labels, template)
        suggestion = normalize_suggestion(suggestion)

        def apply(update: EntityUpdate) -> None:
            if update.labels is not None:
                ctx.github.set_pull_request_labels(repo, number, update.labels)
            if update.body is not None:
                ctx.github.update_pull_request_body(repo, number, update.body)

        update = review_and_apply(
            ctx, entity="pull request", suggestion=suggestion, scope=scope, apply=apply
        )
        return SuggestionOutcome(number=number, update=update)
