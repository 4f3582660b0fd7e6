"""Interactive menu shown when gh-labels runs without a command."""

import dataclasses
from pathlib import Path

from gh_labels.cli.commands.help_cmd import print_help
from gh_labels.cli.errors import exit_on_error
from gh_labels.config import AppConfig
from gh_labels.context import LabelsContext, create_context
from gh_labels.gateway.console.abc import Console
from gh_labels.gateway.console.real import RealConsole
from gh_labels.prompts import MenuAction, ask_github_token, choose_action, choose_apply_scope
from gh_labels.workflows.add_labels import add_labels_workflow
from gh_labels.workflows.get_labels import get_labels_workflow
from gh_labels.workflows.remove_labels import remove_labels_workflow
from gh_labels.workflows.suggest_issue import suggest_issue_workflow
from gh_labels.workflows.suggest_pr import suggest_pr_workflow


def run_interactive(existing: LabelsContext | None, *, config: AppConfig, cwd: Path) -> None:
    """Ask for one action and run it.

    Args:
        existing: Context provided by the caller (tests), or None to build one
            on demand after the action is chosen
        config: Resolved configuration
        cwd: Working directory at invocation
    """
    console = existing.console if existing is not None else RealConsole()

    with exit_on_error():
        action = choose_action(console)
        if action == "exit":
            return
        if action == "help":
            print_help()
            return

        ctx = existing if existing is not None else _create_context(console, config, cwd)
        _run_action(ctx, action)


def _create_context(console: Console, config: AppConfig, cwd: Path) -> LabelsContext:
    if config.github_token is None:
        config = dataclasses.replace(config, github_token=ask_github_token(console))
    return create_context(config, cwd=cwd, console=console)


def _run_action(ctx: LabelsContext, action: MenuAction) -> None:
    if action == "add-labels":
        add_labels_workflow(ctx)
    elif action == "get-labels":
        get_labels_workflow(ctx, None)
    elif action == "remove-labels":
        remove_labels_workflow(ctx)
    elif action == "suggest-labels":
        suggest_pr_workflow(ctx, choose_apply_scope(ctx.console))
    elif action == "suggest-issue-labels":
        suggest_issue_workflow(ctx, choose_apply_scope(ctx.console))
