"""Tests for the gh-labels command line surface."""

import json
from pathlib import Path

from click.testing import CliRunner

from gh_labels.cli.cli import cli
from gh_labels.gateway.ai.fake import FakeSuggestionGateway
from gh_labels.gateway.console.fake import FakeConsole
from gh_labels.gateway.github.fake import FakeGitHubGateway
from gh_labels.testing import context_for_test
from tests.test_utils.gh_labels_builders import BUG, REPO, make_pull_request, make_suggestion


def test_help_command_lists_all_commands() -> None:
    runner = CliRunner()
    with runner.isolated_filesystem():
        result = runner.invoke(cli, ["help"], env={"GITHUB_TOKEN": None})

    assert result.exit_code == 0, result.output
    assert "Available commands:" in result.stdout
    for name in [
        "add-labels",
        "get-labels",
        "remove-labels",
        "suggest-labels",
        "suggest-issue-labels",
    ]:
        assert name in result.stdout


def test_subcommand_help_needs_no_token() -> None:
    runner = CliRunner()
    with runner.isolated_filesystem():
        result = runner.invoke(cli, ["suggest-labels", "--help"], env={"GITHUB_TOKEN": None})

    assert result.exit_code == 0, result.output
    assert "--labels-only" in result.output
    assert "--no-description" in result.output


def test_missing_token_exits_with_error() -> None:
    runner = CliRunner()
    with runner.isolated_filesystem():
        result = runner.invoke(cli, ["add-labels"], env={"GITHUB_TOKEN": None})

    assert result.exit_code == 1
    assert "Error: " in result.output
    assert "GitHub token" in result.output


def test_add_labels_command() -> None:
    github = FakeGitHubGateway(repositories=[REPO])
    console = FakeConsole(select_responses=[0], select_many_responses=[[0]])
    ctx = context_for_test(github=github, console=console)

    result = CliRunner().invoke(cli, ["add-labels"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert 'Label "bug" added successfully!' in result.output
    assert [label.name for _, label in github.created_labels] == ["bug"]


def test_remove_labels_command() -> None:
    github = FakeGitHubGateway(repositories=[REPO], labels={REPO: [BUG]})
    console = FakeConsole(select_responses=[0], select_many_responses=[[0]])
    ctx = context_for_test(github=github, console=console)

    result = CliRunner().invoke(cli, ["remove-labels"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert github.deleted_labels == [(REPO, "bug")]


def test_get_labels_stdout_prints_only_json() -> None:
    github = FakeGitHubGateway(repositories=[REPO], labels={REPO: [BUG]})
    ctx = context_for_test(github=github, console=FakeConsole(select_responses=[0]))

    result = CliRunner().invoke(cli, ["get-labels", "--stdout"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout) == [
        {"name": "bug", "color": "d73a4a", "description": "Something isn't working"}
    ]


def test_get_labels_output_file(tmp_path: Path) -> None:
    github = FakeGitHubGateway(repositories=[REPO], labels={REPO: [BUG]})
    ctx = context_for_test(github=github, console=FakeConsole(select_responses=[0]), cwd=tmp_path)

    result = CliRunner().invoke(cli, ["get-labels", "-o", "exported.json"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert (tmp_path / "exported.json").exists()
    assert "Saved 1 label(s) from acme/widgets" in result.output


def test_get_labels_rejects_output_with_stdout() -> None:
    ctx = context_for_test()

    result = CliRunner().invoke(cli, ["get-labels", "-o", "x.json", "--stdout"], obj=ctx)

    assert result.exit_code == 2
    assert "cannot be used together" in result.output


def test_suggest_labels_rejects_all_features_disabled() -> None:
    console = FakeConsole()
    ctx = context_for_test(console=console)

    result = CliRunner().invoke(
        cli, ["suggest-labels", "--no-labels", "--no-description"], obj=ctx
    )

    assert result.exit_code == 1
    assert "Error: At least one feature must be enabled" in result.output
    assert console.prompts == []


def test_suggest_labels_labels_only() -> None:
    github = FakeGitHubGateway(
        repositories=[REPO],
        labels={REPO: [BUG]},
        pull_requests={REPO: {7: make_pull_request()}},
    )
    console = FakeConsole(select_responses=[0, 0], confirm_responses=[True])
    ctx = context_for_test(
        github=github,
        suggestions=FakeSuggestionGateway(suggestion=make_suggestion()),
        console=console,
    )

    result = CliRunner().invoke(cli, ["suggest-labels", "--labels-only"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert github.pr_label_updates == [(REPO, 7, ["bug"])]
    assert github.pr_body_updates == []


def test_suggest_issue_labels_without_open_issues_fails() -> None:
    github = FakeGitHubGateway(repositories=[REPO])
    ctx = context_for_test(github=github, console=FakeConsole(select_responses=[0]))

    result = CliRunner().invoke(cli, ["suggest-issue-labels"], obj=ctx)

    assert result.exit_code == 1
    assert "Error: No open issues found in this repository." in result.output


def test_version_option_reports_installed_package() -> None:
    result = CliRunner().invoke(cli, ["--version"])

    assert result.exit_code == 0, result.output
    assert "version" in result.output
