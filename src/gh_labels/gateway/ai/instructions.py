"""Prompt text sent to the AI service."""

from gh_labels.gateway.github.types import IssueDetails, Label, PullRequestDetails

CONTENT_SUGGESTION_PROMPT = """You are a GitHub label assistant. \
Your task is to suggest appropriate labels and a description for a {entity} based on its content.

Here's information about the {entity}:
{summary}

These are the labels available in the repository:
{available_labels}
{template_section}
Based on the {entity} content, suggest the most relevant labels from the available ones.
If the {entity} content suggests a new label that doesn't exist yet, you can suggest it as well.

For each suggested label, provide:
1. The name of the label
2. A description explaining why this label is appropriate
3. A confidence score between 1-100 for how relevant this label is (must be a number, not a string)
4. Whether this is a new label (true) or an existing one (false)

Also write an improved description for the {entity} in two languages, English (en) and
Polish (pl). Each version needs its own confidence score between 1-100.
"""

TEMPLATE_SECTION = """
The repository uses this {entity} template. Follow its structure in the description:
{template}
"""


def format_available_labels(labels: list[Label]) -> str:
    return "\n".join(f"{label.name}: {label.description or 'No description'}" for label in labels)


def format_pull_request_summary(pull_request: PullRequestDetails) -> str:
    file_changes = "\n".join(
        f"- {file.name} ({file.status}, +{file.additions}, -{file.deletions})"
        for file in pull_request.files
    )
    return (
        f"Pull Request Title: {pull_request.title}\n"
        f"Repository: {pull_request.repo}\n"
        "\n"
        "Description:\n"
        f"{pull_request.description or 'No description provided'}\n"
        "\n"
        "Files Changed:\n"
        f"{file_changes}\n"
    )


def format_issue_summary(issue: IssueDetails) -> str:
    return (
        f"Issue Title: {issue.title}\n"
        f"Repository: {issue.repo}\n"
        f"State: {issue.state}\n"
        f"Created: {issue.created_at}\n"
        f"Updated: {issue.updated_at}\n"
        "\n"
        "Description:\n"
        f"{issue.description or 'No description provided'}\n"
    )


def build_pull_request_prompt(
    pull_request: PullRequestDetails, labels: list[Label], template: str | None
) -> str:
    return _build_prompt(
        entity="pull request",
        summary=format_pull_request_summary(pull_request),
        labels=labels,
        template=template,
    )


def build_issue_prompt(issue: IssueDetails, labels: list[Label], template: str | None) -> str:
    return _build_prompt(
        entity="issue",
        summary=format_issue_summary(issue),
        labels=labels,
        template=template,
    )


def _build_prompt(*, entity: str, summary: str, labels: list[Label], template: str | None) -> str:
    template_section = ""
    if template is not None:
        template_section = TEMPLATE_SECTION.format(entity=entity, template=template)

    return CONTENT_SUGGESTION_PROMPT.format(
        entity=entity,
        summary=summary,
        available_labels=format_available_labels(labels),
        template_section=template_section,
    )
