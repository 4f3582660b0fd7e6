"""Fake implementation of GitHub operations for testing."""

from gh_labels.gateway.github.abc import GitHubGateway
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
    split_repo_ref,
)


class FakeGitHubGateway(GitHubGateway):
    """In-memory fake implementation of GitHub operations.

    This class has NO public setup methods. All state is provided via the
    constructor using keyword arguments.

    Constructor Injection:
    ---------------------
    - repositories: Full names returned by list_repositories()
    - labels: Mapping of repo -> labels currently defined in it
    - pull_requests: Mapping of repo -> {number: PullRequestDetails} (open PRs)
    - issues: Mapping of repo -> {number: IssueDetails}; closed ones are not listed
    - files: Mapping of (repo, path) -> file content
    - label_errors: Mapping of label name -> exception raised when creating
      or deleting that label
    - file_errors: Mapping of path -> exception raised when fetching that path

    Mutation Tracking:
    -----------------
    - created_labels: (repo, Label) tuples from create_label()
    - deleted_labels: (repo, name) tuples from delete_label()
    - pr_label_updates / issue_label_updates: (repo, number, names) tuples
    - pr_body_updates / issue_body_updates: (repo, number, body) tuples
    - probed_paths: paths requested through get_repository_file(), in order
    """

    def __init__(
        self,
        *,
        repositories: list[str] | None = None,
        labels: dict[str, list[Label]] | None = None,
        pull_requests: dict[str, dict[int, PullRequestDetails]] | None = None,
        issues: dict[str, dict[int, IssueDetails]] | None = None,
        files: dict[tuple[str, str], str] | None = None,
        label_errors: dict[str, Exception] | None = None,
        file_errors: dict[str, Exception] | None = None,
    ) -> None:
        self._repositories = repositories if repositories is not None else []
        self._labels: dict[str, list[Label]] = {
            repo: list(repo_labels) for repo, repo_labels in (labels or {}).items()
        }
        self._pull_requests = pull_requests if pull_requests is not None else {}
        self._issues = issues if issues is not None else {}
        self._files = files if files is not None else {}
        self._label_errors = label_errors if label_errors is not None else {}
        self._file_errors = file_errors if file_errors is not None else {}

        self._created_labels: list[tuple[str, Label]] = []
        self._deleted_labels: list[tuple[str, str]] = []
        self._pr_label_updates: list[tuple[str, int, list[str]]] = []
        self._pr_body_updates: list[tuple[str, int, str]] = []
        self._issue_label_updates: list[tuple[str, int, list[str]]] = []
        self._issue_body_updates: list[tuple[str, int, str]] = []
        self._probed_paths: list[str] = []

    # ============================================================================
    # Query Operations
    # ============================================================================

    def list_repositories(self) -> list[str]:
        return list(self._repositories)

    def get_repository_file(self, repo: str, path: str) -> str | RepositoryFileNotFound:
        split_repo_ref(repo)
        self._probed_paths.append(path)
        if path in self._file_errors:
            raise self._file_errors[path]
        content = self._files.get((repo, path))
        if content is None:
            return RepositoryFileNotFound(path=path)
        return content

    def list_labels(self, repo: str) -> list[Label]:
        split_repo_ref(repo)
        return list(self._labels.get(repo, []))

    def list_open_pull_requests(self, repo: str) -> list[PullRequestSummary]:
        split_repo_ref(repo)
        return [
            PullRequestSummary(number=number, title=details.title)
            for number, details in self._pull_requests.get(repo, {}).items()
        ]

    def get_pull_request(self, repo: str, number: int) -> PullRequestDetails:
        return self._pull_requests[repo][number]

    def list_open_issues(self, repo: str) -> list[IssueSummary]:
        split_repo_ref(repo)
        return [
            IssueSummary(number=number, title=details.title)
            for number, details in self._issues.get(repo, {}).items()
            if details.state == "open"
        ]

    def get_issue(self, repo: str, number: int) -> IssueDetails:
        return self._issues[repo][number]

    # ============================================================================
    # Mutation Operations
    # ============================================================================

    def create_label(self, repo: str, label: Label) -> LabelCreated | LabelAlreadyExists:
        split_repo_ref(repo)
        if label.name in self._label_errors:
            raise self._label_errors[label.name]

        existing = self._labels.setdefault(repo, [])
        if any(current.name == label.name for current in existing):
            return LabelAlreadyExists(name=label.name)

        existing.append(label)
        self._created_labels.append((repo, label))
        return LabelCreated(name=label.name)

    def delete_label(self, repo: str, name: str) -> LabelDeleted | LabelNotFound:
        split_repo_ref(repo)
        if name in self._label_errors:
            raise self._label_errors[name]

        existing = self._labels.get(repo, [])
        remaining = [label for label in existing if label.name != name]
        if len(remaining) == len(existing):
            return LabelNotFound(name=name)

        self._labels[repo] = remaining
        self._deleted_labels.append((repo, name))
        return LabelDeleted(name=name)

    def set_pull_request_labels(self, repo: str, number: int, names: list[str]) -> None:
        self._pr_label_updates.append((repo, number, list(names)))

    def update_pull_request_body(self, repo: str, number: int, body: str) -> None:
        self._pr_body_updates.append((repo, number, body))

    def set_issue_labels(self, repo: str, number: int, names: list[str]) -> None:
        self._issue_label_updates.append((repo, number, list(names)))

    def update_issue_body(self, repo: str, number: int, body: str) -> None:
        self._issue_body_updates.append((repo, number, body))

    # ============================================================================
    # Mutation Tracking Properties
    # ============================================================================

    @property
    def created_labels(self) -> list[tuple[str, Label]]:
        return self._created_labels.copy()

    @property
    def deleted_labels(self) -> list[tuple[str, str]]:
        return self._deleted_labels.copy()

    @property
    def pr_label_updates(self) -> list[tuple[str, int, list[str]]]:
        return self._pr_label_updates.copy()

    @property
    def pr_body_updates(self) -> list[tuple[str, int, str]]:
        return self._pr_body_updates.copy()

    @property
    def issue_label_updates(self) -> list[tuple[str, int, list[str]]]:
        return self._issue_label_updates.copy()

    @property
    def issue_body_updates(self) -> list[tuple[str, int, str]]:
        return self._issue_body_updates.copy()

    @property
    def probed_paths(self) -> list[str]:
        return self._probed_paths.copy()

    def labels_in(self, repo: str) -> list[Label]:
        """Current label set of a repository, for test assertions."""
        return list(self._labels.get(repo, []))
