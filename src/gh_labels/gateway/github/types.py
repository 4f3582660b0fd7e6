"""Data types for GitHub label, pull request and issue operations."""

from dataclasses import dataclass
from typing import Literal

from gh_labels.errors import PublicError

FileStatus = Literal["added", "modified", "removed"]
IssueState = Literal["open", "closed"]


@dataclass(frozen=True)
class Label:
    """A repository label.

    Attributes:
        name: Label name, unique within a repository
        color: Hex color without the leading '#'
        description: Free-form description ("" when unset)
    """

    name: str
    color: str
    description: str = ""


@dataclass(frozen=True)
class PullRequestSummary:
    """One row of the open pull request listing."""

    number: int
    title: str


@dataclass(frozen=True)
class PullRequestFile:
    """A file changed by a pull request."""

    name: str
    status: FileStatus
    additions: int
    deletions: int
    changes: int
    patch: str | None = None


@dataclass(frozen=True)
class PullRequestDetails:
    """Snapshot of a pull request used for AI analysis."""

    title: str
    description: str
    files: list[PullRequestFile]
    repo: str


@dataclass(frozen=True)
class IssueSummary:
    """One row of the open issue listing."""

    number: int
    title: str


@dataclass(frozen=True)
class IssueDetails:
    """Snapshot of an issue used for AI analysis.

    Timestamps are ISO-8601 strings exactly as GitHub reports them.
    """

    title: str
    description: str
    repo: str
    state: IssueState
    created_at: str
    updated_at: str


@dataclass(frozen=True)
class LabelCreated:
    name: str


@dataclass(frozen=True)
class LabelAlreadyExists:
    """Sentinel returned when GitHub rejects a label that already exists (HTTP 422)."""

    name: str


@dataclass(frozen=True)
class LabelDeleted:
    name: str


@dataclass(frozen=True)
class LabelNotFound:
    """Sentinel returned when the label to delete does not exist (HTTP 404)."""

    name: str


@dataclass(frozen=True)
class RepositoryFileNotFound:
    """Sentinel returned when a repository path has no file content."""

    path: str


def split_repo_ref(repo: str) -> tuple[str, str]:
    """Split an "owner/name" reference into its two segments.

    Raises:
        PublicError: If the reference is not exactly two non-empty segments
    """
    parts = repo.split("/")
    if len(parts) != 2 or not parts[0] or not parts[1]:
        raise PublicError(f"Invalid repository reference: {repo!r} (expected owner/name)")
    return parts[0], parts[1]
