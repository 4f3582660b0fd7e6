"""Abstract base class for GitHub operations used by gh-labels workflows."""

from abc import ABC, abstractmethod

from gh_labels.gateway.github.types import (
    IssueDetails,
    IssueSummary,
    Label,
    LabelAlreadyExists,
    LabelCreated,
    LabelDeleted,
    LabelNotFound,
    PullRequestDetails,
    PullRequestSummary,
    RepositoryFileNotFound,
)


class GitHubGateway(ABC):
    """Abstract interface for GitHub repository, label, PR and issue operations.

    All implementations (real and fake) must implement this interface.
    Repositories are addressed by their "owner/name" full name.

    Unless documented otherwise, methods raise GitHubApiError for unexpected
    HTTP statuses and NetworkError for transport failures.
    """

    # --- Repositories ---

    @abstractmethod
    def list_repositories(self) -> list[str]:
        """List repositories of the authenticated user.

        Returns:
            Repository full names ("owner/name")

        Raises:
            GitHubApiError: On authentication failure or other API error
        """
        ...

    @abstractmethod
    def get_repository_file(self, repo: str, path: str) -> str | RepositoryFileNotFound:
        """Fetch the decoded text content of a file in the default branch.

        Args:
            repo: Repository full name
            path: Path of the file inside the repository

        Returns:
            File content, or RepositoryFileNotFound when the path does not
            exist or is not a regular file
        """
        ...

    # --- Labels ---

    @abstractmethod
    def list_labels(self, repo: str) -> list[Label]:
        """List all labels defined in a repository.

        Args:
            repo: Repository full name

        Returns:
            Labels with missing descriptions normalized to ""
        """
        ...

    @abstractmethod
    def create_label(self, repo: str, label: Label) -> LabelCreated | LabelAlreadyExists:
        """Create a label in a repository.

        Args:
            repo: Repository full name
            label: Label to create

        Returns:
            LabelCreated on success, LabelAlreadyExists when GitHub reports the
            label name is taken (HTTP 422)
        """
        ...

    @abstractmethod
    def delete_label(self, repo: str, name: str) -> LabelDeleted | LabelNotFound:
        """Delete a label from a repository.

        Args:
            repo: Repository full name
            name: Name of the label to delete

        Returns:
            LabelDeleted on success, LabelNotFound when it does not exist (HTTP 404)
        """
        ...

    # --- Pull requests ---

    @abstractmethod
    def list_open_pull_requests(self, repo: str) -> list[PullRequestSummary]:
        """List open pull requests of a repository."""
        ...

    @abstractmethod
    def get_pull_request(self, repo: str, number: int) -> PullRequestDetails:
        """Fetch a pull request together with its changed files.

        Args:
            repo: Repository full name
            number: Pull request number

        Returns:
            PullRequestDetails snapshot
        """
        ...

    @abstractmethod
    def set_pull_request_labels(self, repo: str, number: int, names: list[str]) -> None:
        """Replace the labels of a pull request."""
        ...

    @abstractmethod
    def update_pull_request_body(self, repo: str, number: int, body: str) -> None:
        """Replace the body of a pull request. An empty body is a valid update."""
        ...

    # --- Issues ---

    @abstractmethod
    def list_open_issues(self, repo: str) -> list[IssueSummary]:
        """List open issues of a repository.

        GitHub reports pull requests through the same endpoint; those rows
        are excluded.
        """
        ...

    @abstractmethod
    def get_issue(self, repo: str, number: int) -> IssueDetails:
        """Fetch an issue snapshot."""
        ...

    @abstractmethod
    def set_issue_labels(self, repo: str, number: int, names: list[str]) -> None:
        """Replace the labels of an issue."""
        ...

    @abstractmethod
    def update_issue_body(self, repo: str, number: int, body: str) -> None:
        """Replace the body of an issue. An empty body is a valid update."""
        ...
