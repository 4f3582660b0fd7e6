"""Building blocks shared by the label and suggestion workflows."""

import logging
from collections.abc import Callable
from dataclasses import dataclass

from gh_labels.context import LabelsContext
from gh_labels.errors import GitHubApiError, NetworkError, PublicError
from gh_labels.gateway.ai.types import (
    LANGUAGE_NAMES,
    ContentSuggestion,
    DescriptionSuggestion,
    LabelSuggestion,
    Language,
)
from gh_labels.gateway.github.abc import GitHubGateway
from gh_labels.gateway.github.types import Label, RepositoryFileNotFound
from gh_labels.output import heading, spinner, success, user_output, warning
from gh_labels.prompts import choose_language, choose_repository, confirm_apply
from gh_labels.selective import ApplyScope

logger = logging.getLogger(__name__)

MIN_CONFIDENCE = 1
MAX_CONFIDENCE = 100

NO_CHANGES_MESSAGE = "No changes were applied."


@dataclass(frozen=True)
class LabelBatchResult:
    """Outcome of an add-labels or remove-labels run, by label name."""

    applied: list[str]
    skipped: list[str]
    failed: list[str]


@dataclass(frozen=True)
class EntityUpdate:
    """Partial update of a pull request or issue.

    A None field is absent from the update. An empty body is present.
    """

    labels: list[str] | None
    body: str | None

    def to_payload(self) -> dict[str, list[str] | str]:
        payload: dict[str, list[str] | str] = {}
        if self.labels is not None:
            payload["labels"] = list(self.labels)
        if self.body is not None:
            payload["body"] = self.body
        return payload


@dataclass(frozen=True)
class SuggestionOutcome:
    """Result of a suggestion run.

    Attributes:
        number: Pull request or issue number the run targeted
        update: The applied update, or None when the user declined
    """

    number: int
    update: EntityUpdate | None


def select_repository(ctx: LabelsContext) -> str:
    with spinner("Fetching repositories..."):
        repositories = ctx.github.list_repositories()
    return choose_repository(ctx.console, repositories)


def fetch_labels(ctx: LabelsContext, repo: str) -> list[Label]:
    with spinner(f"Fetching labels from {repo}..."):
        return ctx.github.list_labels(repo)


def find_repository_template(github: GitHubGateway, repo: str, paths: list[str]) -> str | None:
    """Return the content of the first candidate path that exists in the repository.

    API or network errors on one candidate are logged and the next candidate is tried.
    """
    for path in paths:
        try:
            content = github.get_repository_file(repo, path)
        except (GitHubApiError, NetworkError) as error:
            logger.debug("Could not fetch %s from %s: %s", path, repo, error)
            continue
        if isinstance(content, RepositoryFileNotFound):
            continue
        logger.debug("Using template %s from %s", path, repo)
        return content
    return None


def describe_item_error(error: GitHubApiError | NetworkError) -> str:
    """One-line reason for a failed per-label request; transport details stay in the log."""
    if isinstance(error, GitHubApiError):
        return error.message
    return "network error"


def clamp_confidence(value: int) -> int:
    return min(max(MIN_CONFIDENCE, value), MAX_CONFIDENCE)


def normalize_suggestion(suggestion: ContentSuggestion) -> ContentSuggestion:
    """Validate that both description variants exist and clamp every confidence.

    Raises:
        PublicError: If a language variant is missing
    """
    for language in LANGUAGE_NAMES:
        if suggestion.description_for(language) is None:
            raise PublicError(
                "AI service returned an incomplete suggestion: "
                f"missing {LANGUAGE_NAMES[language]} description."
            )

    return ContentSuggestion(
        labels=[
            LabelSuggestion(
                name=label.name,
                description=label.description,
                confidence=clamp_confidence(label.confidence),
                is_new=label.is_new,
            )
            for label in suggestion.labels
        ],
        description_en=_clamp_description(suggestion.description_en),
        description_pl=_clamp_description(suggestion.description_pl),
    )


def _clamp_description(description: DescriptionSuggestion | None) -> DescriptionSuggestion | None:
    if description is None:
        return None
    return DescriptionSuggestion(
        content=description.content,
        confidence=clamp_confidence(description.confidence),
    )


def present_suggestions(suggestion: ContentSuggestion, scope: ApplyScope, entity: str) -> None:
    """Print the in-scope parts of a suggestion."""
    user_output(f"\nHere are the suggestions for this {entity}:")

    if scope.apply_labels:
        user_output("")
        heading("Suggested Labels:")
        if not suggestion.labels:
            user_output("No labels suggested.")
        for label in suggestion.labels:
            status = "[NEW]" if label.is_new else "[EXISTING]"
            user_output(f"{status} {label.name} (Confidence: {label.confidence}%)")
            user_output(f"   Reason: {label.description}")
            user_output("")

    if scope.apply_description:
        user_output("")
        heading("Suggested Description:")
        for language, name in LANGUAGE_NAMES.items():
            description = suggestion.description_for(language)
            if description is None:
                continue
            user_output(f"\n{name} version:")
            user_output(f"Confidence: {description.confidence}%")
            user_output(description.content)
        user_output("")


def build_update(
    suggestion: ContentSuggestion, scope: ApplyScope, language: Language | None
) -> EntityUpdate:
    """Build the update holding only the in-scope fields."""
    labels: list[str] | None = None
    if scope.apply_labels:
        labels = [label.name for label in suggestion.labels]

    body: str | None = None
    if scope.apply_description and language is not None:
        description = suggestion.description_for(language)
        if description is not None:
            body = description.content

    return EntityUpdate(labels=labels, body=body)


def review_and_apply(
    ctx: LabelsContext,
    *,
    entity: str,
    suggestion: ContentSuggestion,
    scope: ApplyScope,
    apply: Callable[[EntityUpdate], None],
) -> EntityUpdate | None:
    """Show a normalized suggestion, confirm once and apply the in-scope parts.

    Returns:
        The applied update, or None when the user declined
    """
    present_suggestions(suggestion, scope, entity)

    if not confirm_apply(ctx.console, entity):
        user_output(NO_CHANGES_MESSAGE)
        return None

    language = choose_language(ctx.console) if scope.apply_description else None
    update = build_update(suggestion, scope, language)

    with spinner(f"Applying changes to the {entity}..."):
        apply(update)

    success(f"Successfully applied {' and '.join(scope.feature_names)} to the {entity}!")
    return update


def warn_missing_template(entity: str) -> None:
    warning(f"No {entity} template found, proceeding without it.")
