import logging
import os
from pathlib import Path

import click

from gh_labels.cli.commands.add_labels import add_labels_cmd
from gh_labels.cli.commands.get_labels import get_labels_cmd
from gh_labels.cli.commands.help_cmd import help_cmd
from gh_labels.cli.commands.remove_labels import remove_labels_cmd
from gh_labels.cli.commands.suggest_issue_labels import suggest_issue_labels_cmd
from gh_labels.cli.commands.suggest_labels import suggest_labels_cmd
from gh_labels.cli.errors import exit_on_error
from gh_labels.cli.interactive import run_interactive
from gh_labels.config import load_config, read_environment
from gh_labels.context import create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags

# Commands that never talk to GitHub
OFFLINE_COMMANDS = {"help"}


@click.group(context_settings=CONTEXT_SETTINGS, invoke_without_command=True)
@click.version_option(package_name="gh-labels")
@click.option("-t", "--token", help="GitHub personal access token (overrides GITHUB_TOKEN)")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, token: str | None, debug: bool) -> None:
    """Manage GitHub repository labels, with optional AI suggestions.

    Run without a command to choose an action interactively.
    """
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s - %(levelname)s - %(message)s")

    cwd = Path.cwd()
    config = load_config(
        github_token=token,
        environ=read_environment(cwd, os.environ),
        cwd=cwd,
    )

    if ctx.invoked_subcommand is None:
        run_interactive(ctx.obj, config=config, cwd=cwd)
        return

    # Subcommand --help must work without a token
    if _wants_help(ctx.args):
        return

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None and ctx.invoked_subcommand not in OFFLINE_COMMANDS:
        with exit_on_error():
            ctx.obj = create_context(config, cwd=cwd)


def _wants_help(args: list[str]) -> bool:
    return any(arg in CONTEXT_SETTINGS["help_option_names"] for arg in args)


cli.add_command(add_labels_cmd)
cli.add_command(get_labels_cmd)
cli.add_command(remove_labels_cmd)
cli.add_command(suggest_labels_cmd)
cli.add_command(suggest_issue_labels_cmd)
cli.add_command(help_cmd)


def main() -> None:
    """CLI entry point used by the `gh-labels` console script."""
    cli()
