"""Fake AI suggestion gateway for testing."""

from gh_labels.gateway.ai.abc import SuggestionGateway
from gh_labels.gateway.ai.types import ContentSuggestion
from gh_labels.gateway.github.types import IssueDetails, Label, PullRequestDetails


class FakeSuggestionGateway(SuggestionGateway):
    """In-memory fake returning a configured suggestion.

    This class has NO public setup methods. All state is provided via constructor.

    Constructor Injection:
    ---------------------
    - suggestion: Returned by every call
    - error: When set, raised by every call instead

    Call Tracking:
    -------------
    - pr_calls: (pull_request, labels, template) tuples
    - issue_calls: (issue, labels, template) tuples
    """

    def __init__(
        self,
        *,
        suggestion: ContentSuggestion | None = None,
        error: Exception | None = None,
    ) -> None:
        self._suggestion = suggestion
        self._error = error
        self._pr_calls: list[tuple[PullRequestDetails, list[Label], str | None]] = []
        self._issue_calls: list[tuple[IssueDetails, list[Label], str | None]] = []

    def suggest_pr_content(
        self,
        pull_request: PullRequestDetails,
        labels: list[Label],
        template: str | None,
    ) -> ContentSuggestion:
        self._pr_calls.append((pull_request, list(labels), template))
        return self._respond()

    def suggest_issue_content(
        self,
        issue: IssueDetails,
        labels: list[Label],
        template: str | None,
    ) -> ContentSuggestion:
        self._issue_calls.append((issue, list(labels), template))
        return self._respond()

    def _respond(self) -> ContentSuggestion:
        if self._error is not None:
            raise self._error
        if self._suggestion is None:
            raise AssertionError("FakeSuggestionGateway called without a configured suggestion")
        return self._suggestion

    @property
    def pr_calls(self) -> list[tuple[PullRequestDetails, list[Label], str | None]]:
        return self._pr_calls.copy()

    @property
    def issue_calls(self) -> list[tuple[IssueDetails, list[Label], str | None]]:
        return self._issue_calls.copy()

    @property
    def call_count(self) -> int:
        return len(self._pr_calls) + len(self._issue_calls)
