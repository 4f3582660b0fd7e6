"""AI-assisted labels and description for an issue."""

from gh_labels.context import LabelsContext
from gh_labels.errors import PublicError, workflow_errors
from gh_labels.output import spinner
from gh_labels.prompts import choose_issue
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

ISSUE_TEMPLATE_PATHS = [
    ".github/ISSUE_TEMPLATE.md",
    ".github/issue_template.md",
    "ISSUE_TEMPLATE.md",
    "issue_template.md",
]

NO_OPEN_ISSUES_MESSAGE = "No open issues found in this repository."


def suggest_issue_workflow(ctx: LabelsContext, options: SelectiveOptions) -> SuggestionOutcome:
    """Suggest labels and a description for an open issue and apply them."""
    with workflow_errors("suggesting issue labels"):
        scope = resolve_apply_scope(options)

        repo = select_repository(ctx)
        with spinner("Fetching open issues..."):
            issues = ctx.github.list_open_issues(repo)
        if not issues:
            raise PublicError(NO_OPEN_ISSUES_MESSAGE)
        number = choose_issue(ctx.console, issues)

        labels = fetch_labels(ctx, repo)
        with spinner(f"Fetching issue #{number}..."):
            details = ctx.github.get_issue(repo, number)
        with spinner("Checking for issue template..."):
            template = find_repository_template(ctx.github, repo, ISSUE_TEMPLATE_PATHS)
        if template is None:
            warn_missing_template("issue")

        with spinner("Analyzing issue with AI..."):
            suggestion = ctx.suggestions.suggest_issue_content(details, labels, template)
        suggestion = normalize_suggestion(suggestion)

        def apply(update: EntityUpdate) -> None:
            if update.labels is not None:
                ctx.github.set_issue_labels(repo, number, update.labels)
            if update.body is not None:
                ctx.github.update_issue_body(repo, number, update.body)

        update = review_and_apply(
            ctx, entity="issue", suggestion=suggestion, scope=scope, apply=apply
        )
        return SuggestionOutcome(number=number, update=update)
