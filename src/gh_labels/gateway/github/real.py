"""Production implementation of GitHub operations over the REST API."""

import base64
import logging
from typing import Any
from urllib.parse import quote

import httpx

from gh_labels.errors import GitHubApiError, NetworkError, PublicError
from gh_labels.gateway.github.abc import GitHubGateway
from gh_labels.gateway.github.types import (
    FileStatus,
    IssueDetails,
    IssueSummary,
    Label,
    LabelAlreadyExists,
    LabelCreated,
    LabelDeleted,
    LabelNotFound,
    PullRequestDetails,
    PullRequestFile,
    PullRequestSummary,
    RepositoryFileNotFound,
    split_repo_ref,
)

logger = logging.getLogger(__name__)

MISSING_TOKEN_MESSAGE = (
    "GitHub token is required. Please provide a token or set GITHUB_TOKEN environment variable."
)

API_VERSION = "2022-11-28"
REQUEST_TIMEOUT_SECONDS = 30.0
PER_PAGE = 100
# Upper bound on followed "next" links for a single listing
MAX_PAGES = 10

_FILE_STATUSES: dict[str, FileStatus] = {
    "added": "added",
    "modified": "modified",
    "removed": "removed",
}


class RealGitHubGateway(GitHubGateway):
    """Production implementation using the GitHub REST API via httpx.

    Requests are issued one at a time and are not retried.
    """

    def __init__(
        self,
        *,
        token: str | None,
        base_url: str,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Create the gateway.

        Args:
            token: GitHub personal access token
            base_url: Base URL of the REST API (https://api.github.com)
            transport: Optional httpx transport, used by tests

        Raises:
            PublicError: If no token is available
        """
        if not token:
            raise PublicError(MISSING_TOKEN_MESSAGE)

        self._client = httpx.Client(
            base_url=base_url,
            headers={
                "Accept": "application/vnd.github+json",
                "Authorization": f"Bearer {token}",
                "X-GitHub-Api-Version": API_VERSION,
                "User-Agent": "gh-labels",
            },
            timeout=REQUEST_TIMEOUT_SECONDS,
            transport=transport,
        )

    # --- Repositories ---

    def list_repositories(self) -> list[str]:
        repos = self._get_paginated("/user/repos", params={"sort": "updated"})
        return [repo["full_name"] for repo in repos]

    def get_repository_file(self, repo: str, path: str) -> str | RepositoryFileNotFound:
        response = self._send("GET", f"{_repo_path(repo)}/contents/{quote(path, safe='/')}")
        if response.status_code == 404:
            return RepositoryFileNotFound(path=path)
        _ensure_success(response)

        data = response.json()
        # Directories come back as a list of entries
        if not isinstance(data, dict) or data.get("type") != "file" or "content" not in data:
            return RepositoryFileNotFound(path=path)
        try:
            return base64.b64decode(data["content"]).decode("utf-8")
        except ValueError as error:
            logger.debug("Could not decode %s in %s: %s", path, repo, error)
            return RepositoryFileNotFound(path=path)

    # --- Labels ---

    def list_labels(self, repo: str) -> list[Label]:
        labels = self._get_paginated(f"{_repo_path(repo)}/labels", params={})
        return [
            Label(
                name=label["name"],
                color=label["color"],
                description=label.get("description") or "",
            )
            for label in labels
        ]

    def create_label(self, repo: str, label: Label) -> LabelCreated | LabelAlreadyExists:
        response = self._send(
            "POST",
            f"{_repo_path(repo)}/labels",
            json={"name": label.name, "color": label.color, "description": label.description},
        )
        if response.status_code == 422:
            logger.debug("Label %r rejected with 422: %s", label.name, response.text)
            return LabelAlreadyExists(name=label.name)
        _ensure_success(response)
        return LabelCreated(name=label.name)

    def delete_label(self, repo: str, name: str) -> LabelDeleted | LabelNotFound:
        response = self._send("DELETE", f"{_repo_path(repo)}/labels/{quote(name, safe='')}")
        if response.status_code == 404:
            return LabelNotFound(name=name)
        _ensure_success(response)
        return LabelDeleted(name=name)

    # --- Pull requests ---

    def list_open_pull_requests(self, repo: str) -> list[PullRequestSummary]:
        pulls = self._get_paginated(f"{_repo_path(repo)}/pulls", params={"state": "open"})
        return [PullRequestSummary(number=pr["number"], title=pr["title"]) for pr in pulls]

    def get_pull_request(self, repo: str, number: int) -> PullRequestDetails:
        response = self._send("GET", f"{_repo_path(repo)}/pulls/{number}")
        _ensure_success(response)
        pr = response.json()

        files = self._get_paginated(f"{_repo_path(repo)}/pulls/{number}/files", params={})
        return PullRequestDetails(
            title=pr["title"],
            description=pr.get("body") or "",
            files=[
                PullRequestFile(
                    name=file["filename"],
                    # renamed/copied/changed/unchanged count as modifications
                    status=_FILE_STATUSES.get(file["status"], "modified"),
                    additions=file["additions"],
                    deletions=file["deletions"],
                    changes=file["changes"],
                    patch=file.get("patch"),
                )
                for file in files
            ],
            repo=repo,
        )

    def set_pull_request_labels(self, repo: str, number: int, names: list[str]) -> None:
        # Pull requests share the issue labels endpoint
        self.set_issue_labels(repo, number, names)

    def update_pull_request_body(self, repo: str, number: int, body: str) -> None:
        response = self._send("PATCH", f"{_repo_path(repo)}/pulls/{number}", json={"body": body})
        _ensure_success(response)

    # --- Issues ---

    def list_open_issues(self, repo: str) -> list[IssueSummary]:
        issues = self._get_paginated(f"{_repo_path(repo)}/issues", params={"state": "open"})
        return [
            IssueSummary(number=issue["number"], title=issue["title"])
            for issue in issues
            if "pull_request" not in issue
        ]

    def get_issue(self, repo: str, number: int) -> IssueDetails:
        response = self._send("GET", f"{_repo_path(repo)}/issues/{number}")
        _ensure_success(response)
        issue = response.json()
        return IssueDetails(
            title=issue["title"],
            description=issue.get("body") or "",
            repo=repo,
            state="closed" if issue["state"] == "closed" else "open",
            created_at=issue["created_at"],
            updated_at=issue["updated_at"],
        )

    def set_issue_labels(self, repo: str, number: int, names: list[str]) -> None:
        response = self._send(
            "PUT", f"{_repo_path(repo)}/issues/{number}/labels", json={"labels": names}
        )
        _ensure_success(response)

    def update_issue_body(self, repo: str, number: int, body: str) -> None:
        response = self._send("PATCH", f"{_repo_path(repo)}/issues/{number}", json={"body": body})
        _ensure_success(response)

    # --- Transport ---

    def _send(
        self,
        method: str,
        url: str,
        *,
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
    ) -> httpx.Response:
        logger.debug("GitHub %s %s", method, url)
        try:
            return self._client.request(method, url, params=params, json=json)
        except httpx.TransportError as error:
            raise NetworkError(f"network request to GitHub failed: {error}") from error

    def _get_paginated(self, path: str, *, params: dict[str, Any]) -> list[dict[str, Any]]:
        """Collect items of a listing endpoint, following Link rel="next" headers."""
        items: list[dict[str, Any]] = []
        url = path
        page_params: dict[str, Any] | None = {**params, "per_page": PER_PAGE}
        next_url: str | None = None

        for _ in range(MAX_PAGES):
            response = self._send("GET", url, params=page_params)
            _ensure_success(response)
            items.extend(response.json())

            next_url = response.links.get("next", {}).get("url")
            if next_url is None:
                break
            # The next link already carries the query string
            url = next_url
            page_params = None

        if next_url is not None:
            logger.warning(
                "Stopped listing %s after %d pages; remaining items were not fetched",
                path,
                MAX_PAGES,
            )
        return items


def _repo_path(repo: str) -> str:
    owner, name = split_repo_ref(repo)
    return f"/repos/{owner}/{name}"


def _ensure_success(response: httpx.Response) -> None:
    """Raise GitHubApiError for any non-2xx response."""
    if response.is_success:
        return
    raise GitHubApiError(response.status_code, _error_message(response))


def _error_message(response: httpx.Response) -> str:
    try:
        payload = response.json()
    except ValueError:
        return response.text or response.reason_phrase
    if isinstance(payload, dict) and payload.get("message"):
        return str(payload["message"])
    return response.reason_phrase
