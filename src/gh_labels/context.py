"""Application context with dependency injection."""

from dataclasses import dataclass
from pathlib import Path

from gh_labels.config import AppConfig
from gh_labels.gateway.ai.abc import SuggestionGateway
from gh_labels.gateway.ai.real import RealSuggestionGateway
from gh_labels.gateway.console.abc import Console
from gh_labels.gateway.console.real import RealConsole
from gh_labels.gateway.github.abc import GitHubGateway
from gh_labels.gateway.github.real import RealGitHubGateway
from gh_labels.label_templates import LabelTemplateCatalog


@dataclass(frozen=True)
class LabelsContext:
    """Immutable context holding all dependencies for gh-labels workflows.

    Created at the CLI entry point and threaded through the workflows.
    """

    github: GitHubGateway
    suggestions: SuggestionGateway
    console: Console
    templates: LabelTemplateCatalog
    config: AppConfig
    cwd: Path


def create_context(
    config: AppConfig,
    *,
    cwd: Path,
    console: Console | None = None,
) -> LabelsContext:
    """Create the production context with real implementations.

    Args:
        config: Resolved configuration for this invocation
        cwd: Working directory at CLI invocation
        console: Console to reuse (the interactive menu already owns one)

    Returns:
        LabelsContext wired to GitHub, OpenAI and the terminal

    Raises:
        PublicError: If no GitHub token is configured
    """
    return LabelsContext(
        github=RealGitHubGateway(token=config.github_token, base_url=config.github_api_url),
        suggestions=RealSuggestionGateway(
            api_key=config.openai_api_key, model=config.openai_model
        ),
        console=console if console is not None else RealConsole(),
        templates=LabelTemplateCatalog(config.templates_dir),
        config=config,
        cwd=cwd,
    )
