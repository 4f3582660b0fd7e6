"""Runtime configuration for gh-labels.

Configuration is resolved once at CLI startup and handed to the gateway
constructors. Nothing in the package reads the environment at import time.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from dotenv import dotenv_values

GITHUB_TOKEN_ENV = "GITHUB_TOKEN"
OPENAI_API_KEY_ENV = "OPENAI_API_KEY"
OPENAI_MODEL_ENV = "GH_LABELS_OPENAI_MODEL"
GITHUB_API_URL_ENV = "GH_LABELS_GITHUB_API_URL"
TEMPLATES_DIR_ENV = "GH_LABELS_TEMPLATES_DIR"

DEFAULT_OPENAI_MODEL = "gpt-4o"
DEFAULT_GITHUB_API_URL = "https://api.github.com"
DEFAULT_TEMPLATES_DIRNAME = "labels"


@dataclass(frozen=True)
class AppConfig:
    """Resolved settings for one CLI invocation.

    Attributes:
        github_token: GitHub personal access token, None when not configured
        openai_api_key: OpenAI API key, None when not configured
        openai_model: Chat model used for suggestions
        github_api_url: Base URL of the GitHub REST API
        templates_dir: Directory holding user label templates (*.json)
    """

    github_token: str | None
    openai_api_key: str | None
    openai_model: str
    github_api_url: str
    templates_dir: Path


def read_environment(cwd: Path, environ: Mapping[str, str]) -> dict[str, str]:
    """Merge a .env file in cwd under the process environment.

    Values from the real environment take precedence over the .env file.
    """
    merged: dict[str, str] = {}
    env_file = cwd / ".env"
    if env_file.is_file():
        for key, value in dotenv_values(env_file).items():
            if value is not None:
                merged[key] = value
    merged.update(environ)
    return merged


def load_config(
    *,
    github_token: str | None,
    environ: Mapping[str, str],
    cwd: Path,
) -> AppConfig:
    """Build the AppConfig for this invocation.

    Args:
        github_token: Explicit token from --token; overrides GITHUB_TOKEN
        environ: Environment variables (already merged with .env)
        cwd: Working directory, used for the default templates directory

    Returns:
        AppConfig with empty strings normalized to None
    """
    templates_dir_value = environ.get(TEMPLATES_DIR_ENV)
    if templates_dir_value:
        templates_dir = Path(templates_dir_value).expanduser()
    else:
        templates_dir = cwd / DEFAULT_TEMPLATES_DIRNAME

    return AppConfig(
        github_token=github_token or environ.get(GITHUB_TOKEN_ENV) or None,
        openai_api_key=environ.get(OPENAI_API_KEY_ENV) or None,
        openai_model=environ.get(OPENAI_MODEL_ENV) or DEFAULT_OPENAI_MODEL,
        github_api_url=environ.get(GITHUB_API_URL_ENV) or DEFAULT_GITHUB_API_URL,
        templates_dir=templates_dir,
    )
