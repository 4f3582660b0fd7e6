"""Rendering of surfaced errors at the command boundary."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from gh_labels.errors import PublicError, render_error
from gh_labels.output import error_line

logger = logging.getLogger(__name__)


@contextmanager
def exit_on_error() -> Iterator[None]:
    """Print a PublicError escaping the block as one line and exit with status 1."""
    try:
        yield
    except PublicError as error:
        logger.debug("Command failed", exc_info=error)
        error_line(render_error(error))
        raise SystemExit(1) from None
