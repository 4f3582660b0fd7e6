"""Tests for RealGitHubGateway against an in-process httpx transport."""

import base64
import json
import logging
from collections.abc import Callable

import httpx
import pytest

from gh_labels.errors import GitHubApiError, NetworkError, PublicError
from gh_labels.gateway.github.real import MAX_PAGES, MISSING_TOKEN_MESSAGE, RealGitHubGateway
from gh_labels.gateway.github.types import (
    Label,
    LabelAlreadyExists,
    LabelCreated,
    LabelDeleted,
    LabelNotFound,
    RepositoryFileNotFound,
)

API = "https://api.github.com"


def make_gateway(
    handler: Callable[[httpx.Request], httpx.Response],
) -> RealGitHubGateway:
    return RealGitHubGateway(token="ghp_test", base_url=API, transport=httpx.MockTransport(handler))


def test_missing_token_fails_at_construction() -> None:
    with pytest.raises(PublicError) as exc_info:
        RealGitHubGateway(token=None, base_url=API)

    assert exc_info.value.message == MISSING_TOKEN_MESSAGE


def test_requests_carry_auth_and_api_headers() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=[])

    make_gateway(handler).list_labels("acme/widgets")

    request = seen[0]
    assert request.headers["Authorization"] == "Bearer ghp_test"
    assert request.headers["Accept"] == "application/vnd.github+json"
    assert request.headers["X-GitHub-Api-Version"] == "2022-11-28"
    assert request.url.path == "/repos/acme/widgets/labels"
    assert request.url.params["per_page"] == "100"


def test_list_repositories_follows_pagination() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.params.get("page") == "2":
            return httpx.Response(200, json=[{"full_name": "acme/widgets"}])
        return httpx.Response(
            200,
            json=[{"full_name": "acme/api"}],
            headers={"Link": f'<{API}/user/repos?per_page=100&page=2>; rel="next"'},
        )

    assert make_gateway(handler).list_repositories() == ["acme/api", "acme/widgets"]


def test_list_labels_normalizes_missing_description() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            200,
            json=[
                {"name": "bug", "color": "d73a4a", "description": None},
                {"name": "docs", "color": "0075ca", "description": "Documentation"},
            ],
        )

    assert make_gateway(handler).list_labels("acme/widgets") == [
        Label(name="bug", color="d73a4a", description=""),
        Label(name="docs", color="0075ca", description="Documentation"),
    ]


def test_create_label_success() -> None:
    bodies: list[dict] = []

    def handler(request: httpx.Request) -> httpx.Response:
        bodies.append(json.loads(request.content))
        return httpx.Response(201, json={"name": "bug"})

    result = make_gateway(handler).create_label("acme/widgets", Label(name="bug", color="d73a4a"))

    assert result == LabelCreated(name="bug")
    assert bodies == [{"name": "bug", "color": "d73a4a", "description": ""}]


def test_create_label_conflict_returns_sentinel() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(422, json={"message": "Validation Failed"})

    result = make_gateway(handler).create_label("acme/widgets", Label(name="bug", color="d73a4a"))

    assert result == LabelAlreadyExists(name="bug")


def test_create_label_other_status_raises_api_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(403, json={"message": "Resource not accessible by integration"})

    with pytest.raises(GitHubApiError) as exc_info:
        make_gateway(handler).create_label("acme/widgets", Label(name="bug", color="d73a4a"))

    assert exc_info.value.status_code == 403
    assert exc_info.value.message == (
        "GitHub API error (403): Resource not accessible by integration"
    )


def test_delete_label_url_encodes_name() -> None:
    paths: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        paths.append(request.url.raw_path.decode())
        return httpx.Response(204)

    result = make_gateway(handler).delete_label("acme/widgets", "good first issue")

    assert result == LabelDeleted(name="good first issue")
    assert paths == ["/repos/acme/widgets/labels/good%20first%20issue"]


def test_delete_label_missing_returns_sentinel() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(404, json={"message": "Not Found"})

    assert make_gateway(handler).delete_label("acme/widgets", "bug") == LabelNotFound(name="bug")


def test_transport_failure_raises_network_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(NetworkError):
        make_gateway(handler).list_repositories()


def test_invalid_repo_reference_is_rejected_before_request() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise AssertionError("no request expected")

    with pytest.raises(PublicError, match="Invalid repository reference"):
        make_gateway(handler).list_labels("widgets")


def test_get_pull_request_collects_files_and_normalizes_status() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path.endswith("/files"):
            return httpx.Response(
                200,
                json=[
                    {
                        "filename": "README.md",
                        "status": "renamed",
                        "additions": 1,
                        "deletions": 0,
                        "changes": 1,
                    },
                    {
                        "filename": "src/app.py",
                        "status": "added",
                        "additions": 10,
                        "deletions": 0,
                        "changes": 10,
                        "patch": "@@ -0,0 +1,10 @@",
                    },
                ],
            )
        return httpx.Response(200, json={"title": "Add app", "body": None})

    details = make_gateway(handler).get_pull_request("acme/widgets", 7)

    assert details.title == "Add app"
    assert details.description == ""
    assert details.repo == "acme/widgets"
    assert [(f.name, f.status) for f in details.files] == [
        ("README.md", "modified"),
        ("src/app.py", "added"),
    ]
    assert details.files[1].patch == "@@ -0,0 +1,10 @@"


def test_list_open_issues_excludes_pull_requests() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.params["state"] == "open"
        return httpx.Response(
            200,
            json=[
                {"number": 1, "title": "Crash"},
                {"number": 2, "title": "A PR", "pull_request": {"url": "..."}},
            ],
        )

    issues = make_gateway(handler).list_open_issues("acme/widgets")

    assert [(issue.number, issue.title) for issue in issues] == [(1, "Crash")]


def test_get_issue() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            200,
            json={
                "title": "Crash",
                "body": "Steps",
                "state": "open",
                "created_at": "2024-05-01T10:00:00Z",
                "updated_at": "2024-05-02T10:00:00Z",
            },
        )

    issue = make_gateway(handler).get_issue("acme/widgets", 1)

    assert issue.title == "Crash"
    assert issue.description == "Steps"
    assert issue.state == "open"
    assert issue.created_at == "2024-05-01T10:00:00Z"


def test_set_labels_and_update_body_requests() -> None:
    calls: list[tuple[str, str, dict]] = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append((request.method, request.url.path, json.loads(request.content)))
        return httpx.Response(200, json={})

    gateway = make_gateway(handler)
    gateway.set_pull_request_labels("acme/widgets", 7, ["bug"])
    gateway.update_pull_request_body("acme/widgets", 7, "")
    gateway.set_issue_labels("acme/widgets", 3, [])
    gateway.update_issue_body("acme/widgets", 3, "New body")

    assert calls == [
        ("PUT", "/repos/acme/widgets/issues/7/labels", {"labels": ["bug"]}),
        ("PATCH", "/repos/acme/widgets/pulls/7", {"body": ""}),
        ("PUT", "/repos/acme/widgets/issues/3/labels", {"labels": []}),
        ("PATCH", "/repos/acme/widgets/issues/3", {"body": "New body"}),
    ]


def test_get_repository_file_decodes_content() -> None:
    encoded = base64.b64encode("## Summary\n".encode()).decode()

    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/repos/acme/widgets/contents/.github/pull_request_template.md"
        return httpx.Response(200, json={"type": "file", "content": encoded})

    content = make_gateway(handler).get_repository_file(
        "acme/widgets", ".github/pull_request_template.md"
    )

    assert content == "## Summary\n"


def test_get_repository_file_missing_or_directory() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path.endswith("/docs"):
            return httpx.Response(200, json=[{"name": "index.md"}])
        return httpx.Response(404, json={"message": "Not Found"})

    gateway = make_gateway(handler)

    assert gateway.get_repository_file("acme/widgets", "missing.md") == RepositoryFileNotFound(
        path="missing.md"
    )
    assert gateway.get_repository_file("acme/widgets", "docs") == RepositoryFileNotFound(
        path="docs"
    )


def test_get_repository_file_undecodable_content_is_not_found() -> None:
    encoded = base64.b64encode(b"## Summary\xff\n").decode()

    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path.endswith("/broken.md"):
            return httpx.Response(200, json={"type": "file", "content": "!!not base64"})
        return httpx.Response(200, json={"type": "file", "content": encoded})

    gateway = make_gateway(handler)

    assert gateway.get_repository_file("acme/widgets", "latin1.md") == RepositoryFileNotFound(
        path="latin1.md"
    )
    assert gateway.get_repository_file("acme/widgets", "broken.md") == RepositoryFileNotFound(
        path="broken.md"
    )


def test_listing_past_page_limit_logs_warning(caplog: pytest.LogCaptureFixture) -> None:
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        page = len(requests) + 1
        return httpx.Response(
            200,
            json=[{"full_name": f"acme/repo-{len(requests)}"}],
            headers={"Link": f'<{API}/user/repos?per_page=100&page={page}>; rel="next"'},
        )

    with caplog.at_level(logging.WARNING, logger="gh_labels.gateway.github.real"):
        repositories = make_gateway(handler).list_repositories()

    assert len(requests) == MAX_PAGES
    assert len(repositories) == MAX_PAGES
    assert "Stopped listing /user/repos" in caplog.text
