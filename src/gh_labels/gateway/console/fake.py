"""Fake console implementation for testing.

FakeConsole answers prompts from constructor-configured queues, enabling
deterministic workflow tests without a terminal.
"""

from typing import TypeVar

from gh_labels.gateway.console.abc import Console

T = TypeVar("T")


class FakeConsole(Console):
    """In-memory fake that replays scripted answers.

    This class has NO public setup methods. All state is provided via constructor.

    Each queue is consumed in order. Running out of answers fails the test
    with an AssertionError naming the unexpected prompt.

    Answers for select_many are given as zero-based index lists.
    """

    def __init__(
        self,
        *,
        select_responses: list[int] | None = None,
        select_many_responses: list[list[int]] | None = None,
        confirm_responses: list[bool] | None = None,
        secret_responses: list[str] | None = None,
    ) -> None:
        self._select_responses = list(select_responses or [])
        self._select_many_responses = list(select_many_responses or [])
        self._confirm_responses = list(confirm_responses or [])
        self._secret_responses = list(secret_responses or [])

        self._prompts: list[str] = []
        self._shown_choices: list[list[str]] = []

    def select(self, message: str, choices: list[str]) -> int:
        self._record(message, choices)
        index = _next_response(self._select_responses, message)
        assert 0 <= index < len(choices), f"select index {index} out of range for {message!r}"
        return index

    def select_many(self, message: str, choices: list[str]) -> list[int]:
        self._record(message, choices)
        indexes = _next_response(self._select_many_responses, message)
        assert all(0 <= i < len(choices) for i in indexes), (
            f"select_many indexes {indexes} out of range for {message!r}"
        )
        return indexes

    def confirm(self, message: str, *, default: bool) -> bool:
        self._prompts.append(message)
        return _next_response(self._confirm_responses, message)

    def prompt_secret(self, message: str) -> str:
        self._prompts.append(message)
        return _next_response(self._secret_responses, message)

    def _record(self, message: str, choices: list[str]) -> None:
        self._prompts.append(message)
        self._shown_choices.append(list(choices))

    @property
    def prompts(self) -> list[str]:
        """Every prompt message shown, in order. For test assertions only."""
        return self._prompts.copy()

    @property
    def shown_choices(self) -> list[list[str]]:
        """Choice rows of every select/select_many call, in order."""
        return [choices.copy() for choices in self._shown_choices]


def _next_response(queue: list[T], message: str) -> T:
    if not queue:
        raise AssertionError(f"FakeConsole has no scripted answer for prompt: {message!r}")
    return queue.pop(0)
