"""Tests for the get-labels workflow."""

import json
from pathlib import Path

import pytest

from gh_labels.gateway.console.fake import FakeConsole
from gh_labels.gateway.github.fake import FakeGitHubGateway
from gh_labels.label_templates import parse_labels
from gh_labels.testing import context_for_test
from gh_labels.workflows.get_labels import WriteToStdout, get_labels_workflow
from tests.test_utils.gh_labels_builders import BUG, ENHANCEMENT, REPO


def test_saves_to_default_template_path(tmp_path: Path) -> None:
    github = FakeGitHubGateway(repositories=[REPO], labels={REPO: [BUG, ENHANCEMENT]})
    ctx = context_for_test(
        github=github,
        console=FakeConsole(select_responses=[0]),
        templates_dir=tmp_path / "labels",
        cwd=tmp_path,
    )

    result = get_labels_workflow(ctx, None)

    assert result.path == tmp_path / "labels" / "acme-widgets.json"
    assert parse_labels(result.path.read_text(encoding="utf-8")) == [BUG, ENHANCEMENT]
    assert github.created_labels == []
    assert github.deleted_labels == []


def test_relative_output_is_resolved_against_cwd(tmp_path: Path) -> None:
    github = FakeGitHubGateway(repositories=[REPO], labels={REPO: [BUG]})
    ctx = context_for_test(github=github, console=FakeConsole(select_responses=[0]), cwd=tmp_path)

    result = get_labels_workflow(ctx, Path("out/labels.json"))

    assert result.path == tmp_path / "out" / "labels.json"
    assert result.path.exists()


def test_stdout_destination_prints_json(capsys: pytest.CaptureFixture[str]) -> None:
    github = FakeGitHubGateway(repositories=[REPO], labels={REPO: [BUG]})
    ctx = context_for_test(github=github, console=FakeConsole(select_responses=[0]))

    result = get_labels_workflow(ctx, WriteToStdout())

    assert result.path is None
    assert json.loads(capsys.readouterr().out) == [
        {"name": "bug", "color": "d73a4a", "description": "Something isn't working"}
    ]


def test_repository_without_labels_writes_empty_array(tmp_path: Path) -> None:
    github = FakeGitHubGateway(repositories=[REPO])
    ctx = context_for_test(
        github=github, console=FakeConsole(select_responses=[0]), templates_dir=tmp_path
    )

    result = get_labels_workflow(ctx, None)

    assert result.labels == []
    assert json.loads((tmp_path / "acme-widgets.json").read_text(encoding="utf-8")) == []
