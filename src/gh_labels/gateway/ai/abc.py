"""Abstract base class for AI suggestion operations."""

from abc import ABC, abstractmethod

from gh_labels.gateway.ai.types import ContentSuggestion
from gh_labels.gateway.github.types import IssueDetails, Label, PullRequestDetails


class SuggestionGateway(ABC):
    """Abstract interface for AI-generated label and description suggestions.

    Implementations raise RateLimitError when the service throttles the
    request, OpenAIError for other service failures and NetworkError when
    the service cannot be reached.
    """

    @abstractmethod
    def suggest_pr_content(
        self,
        pull_request: PullRequestDetails,
        labels: list[Label],
        template: str | None,
    ) -> ContentSuggestion:
        """Suggest labels and a bilingual description for a pull request.

        Args:
            pull_request: Pull request snapshot including changed files
            labels: Labels currently defined in the repository
            template: Repository pull request template, if one was found

        Returns:
            Raw suggestion as produced by the service (confidences unclamped)
        """
        ...

    @abstractmethod
    def suggest_issue_content(
        self,
        issue: IssueDetails,
        labels: list[Label],
        template: str | None,
    ) -> ContentSuggestion:
        """Suggest labels and a bilingual description for an issue.

        Args:
            issue: Issue snapshot
            labels: Labels currently defined in the repository
            template: Repository issue template, if one was found

        Returns:
            Raw suggestion as produced by the service (confidences unclamped)
        """
        ...
