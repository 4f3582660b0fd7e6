import click

from gh_labels.output import machine_output

HELP_TEXT = """Available commands:
  add-labels            - Add labels from a template to a GitHub repository
  get-labels            - Save all labels of a GitHub repository as JSON
  remove-labels         - Remove labels from a GitHub repository
  suggest-labels        - Suggest labels and a description for a pull request (AI)
  suggest-issue-labels  - Suggest labels and a description for an issue (AI)
  help                  - Display all available commands

Run gh-labels without a command for interactive mode.
For more details, use: gh-labels [command] --help"""


def print_help() -> None:
    machine_output(HELP_TEXT)


@click.command("help")
def help_cmd() -> None:
    """Display all available commands."""
    print_help()
