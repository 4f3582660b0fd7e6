"""Test factory for creating LabelsContext instances with fakes."""

from pathlib import Path

from gh_labels.config import DEFAULT_GITHUB_API_URL, DEFAULT_OPENAI_MODEL, AppConfig
from gh_labels.context import LabelsContext
from gh_labels.gateway.ai.abc import SuggestionGateway
from gh_labels.gateway.console.abc import Console
from gh_labels.gateway.github.abc import GitHubGateway
from gh_labels.label_templates import LabelTemplateCatalog


def context_for_test(
    github: GitHubGateway | None = None,
    suggestions: SuggestionGateway | None = None,
    console: Console | None = None,
    templates_dir: Path | None = None,
    cwd: Path | None = None,
) -> LabelsContext:
    """Create test context with optional pre-configured implementations.

    Unspecified gateways default to empty fakes. A FakeConsole without
    scripted answers fails the test on the first prompt.

    Args:
        github: Optional GitHubGateway. If None, creates an empty FakeGitHubGateway.
        suggestions: Optional SuggestionGateway. If None, creates FakeSuggestionGateway().
        console: Optional Console. If None, creates FakeConsole().
        templates_dir: User label templates directory (defaults to cwd / "labels")
        cwd: Current working directory (defaults to Path("/fake/cwd"))

    Returns:
        LabelsContext configured with provided values and test defaults

    Example:
        >>> github = FakeGitHubGateway(repositories=["acme/widgets"])
        >>> ctx = context_for_test(github=github, console=FakeConsole(select_responses=[0]))
    """
    from gh_labels.gateway.ai.fake import FakeSuggestionGateway
    from gh_labels.gateway.console.fake import FakeConsole
    from gh_labels.gateway.github.fake import FakeGitHubGateway

    resolved_cwd = cwd if cwd is not None else Path("/fake/cwd")
    resolved_templates_dir = templates_dir if templates_dir is not None else resolved_cwd / "labels"

    return LabelsContext(
        github=github if github is not None else FakeGitHubGateway(),
        suggestions=suggestions if suggestions is not None else FakeSuggestionGateway(),
        console=console if console is not None else FakeConsole(),
        templates=LabelTemplateCatalog(resolved_templates_dir),
        config=AppConfig(
            github_token="test-token",
            openai_api_key="test-key",
            openai_model=DEFAULT_OPENAI_MODEL,
            github_api_url=DEFAULT_GITHUB_API_URL,
            templates_dir=resolved_templates_dir,
        ),
        cwd=resolved_cwd,
    )
