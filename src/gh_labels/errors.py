"""Error taxonomy for gh-labels workflows.

Every workflow surfaces failures as a PublicError (or one of its subclasses)
so the CLI can print a single line and exit nonzero. Gateways raise the typed
errors defined here; workflows normalize anything else with classify_error().
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

logger = logging.getLogger(__name__)

NETWORK_ERROR_MESSAGE = "Network error. Check your internet connection and try again."
RATE_LIMIT_MESSAGE = "Rate limit exceeded. Please try again later."


class PublicError(Exception):
    """Failure intended for direct display to the user."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class OpenAIError(PublicError):
    """The AI service failed for a reason other than rate limiting."""


class RateLimitError(PublicError):
    """The AI service rejected the request because of rate limiting."""


class GitHubApiError(PublicError):
    """GitHub answered with an unexpected status code.

    Attributes:
        status_code: HTTP status returned by GitHub
        api_message: Message field from the GitHub error payload
    """

    def __init__(self, status_code: int, api_message: str) -> None:
        super().__init__(f"GitHub API error ({status_code}): {api_message}")
        self.status_code = status_code
        self.api_message = api_message


class NetworkError(Exception):
    """Transport-level failure talking to GitHub or the AI service.

    Internal only: workflows remap it to a generic connectivity PublicError
    and never show the transport text to the user.
    """


def classify_error(error: Exception, context: str) -> PublicError:
    """Map any exception raised inside a workflow to a public error kind.

    Args:
        error: The exception caught at the workflow boundary
        context: Short description of the running workflow (e.g. "adding labels")

    Returns:
        The error itself when already public, otherwise a new PublicError
    """
    if isinstance(error, PublicError):
        return error

    if isinstance(error, NetworkError) or "network" in str(error).lower():
        logger.debug("Network failure in %s: %s", context, error)
        return PublicError(NETWORK_ERROR_MESSAGE)

    logger.debug("Unexpected failure in %s", context, exc_info=error)
    detail = str(error) or type(error).__name__
    return PublicError(f"Unexpected error in {context}: {detail}")


@contextmanager
def workflow_errors(context: str) -> Iterator[None]:
    """Re-raise every exception escaping the block as a PublicError."""
    try:
        yield
    except PublicError:
        raise
    except Exception as error:
        raise classify_error(error, context) from error


def render_error(error: PublicError) -> str:
    """Return the one-line message shown for a surfaced error."""
    if isinstance(error, RateLimitError):
        return RATE_LIMIT_MESSAGE
    if isinstance(error, OpenAIError):
        return f"AI service error: {error.message}"
    return error.message
