"""Tests for console gateway helpers and the fake console."""

import pytest

from gh_labels.gateway.console.fake import FakeConsole
from gh_labels.gateway.console.real import parse_multi_selection


def test_parse_multi_selection_empty_means_none() -> None:
    assert parse_multi_selection("   ", 3) == []


def test_parse_multi_selection_all() -> None:
    assert parse_multi_selection("ALL", 3) == [0, 1, 2]


def test_parse_multi_selection_numbers_sorted_and_unique() -> None:
    assert parse_multi_selection("3, 1,3", 3) == [0, 2]


@pytest.mark.parametrize("raw", ["0", "4", "1,x", "-1", "1,,2"])
def test_parse_multi_selection_rejects_invalid(raw: str) -> None:
    assert parse_multi_selection(raw, 3) is None


def test_fake_console_replays_answers_in_order() -> None:
    console = FakeConsole(select_responses=[1, 0], confirm_responses=[True])

    assert console.select("first", ["a", "b"]) == 1
    assert console.confirm("sure?", default=True) is True
    assert console.select("second", ["c"]) == 0
    assert console.prompts == ["first", "sure?", "second"]


def test_fake_console_fails_on_unscripted_prompt() -> None:
    console = FakeConsole()

    with pytest.raises(AssertionError, match="no scripted answer"):
        console.confirm("Would you like to apply these changes?", default=True)
