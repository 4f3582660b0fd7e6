"""Selection prompts shared by the workflows and the interactive menu.

Each helper is one blocking round-trip through the Console gateway.
"""

from typing import Literal

from gh_labels.errors import PublicError
from gh_labels.gateway.ai.types import LANGUAGE_NAMES, Language
from gh_labels.gateway.console.abc import Console
from gh_labels.gateway.github.types import IssueSummary, Label, PullRequestSummary
from gh_labels.label_templates import DEFAULT_TEMPLATE_NAME
from gh_labels.selective import ScopeChoice, SelectiveOptions, options_for_scope_choice

MenuAction = Literal[
    "add-labels",
    "get-labels",
    "remove-labels",
    "suggest-labels",
    "suggest-issue-labels",
    "help",
    "exit",
]

MENU_ACTIONS: list[tuple[MenuAction, str]] = [
    ("add-labels", "Add labels to a repository"),
    ("get-labels", "Get labels from a repository"),
    ("remove-labels", "Remove labels from a repository"),
    ("suggest-labels", "Suggest labels for a pull request"),
    ("suggest-issue-labels", "Suggest labels for an issue"),
    ("help", "Display available commands"),
    ("exit", "Exit"),
]

SCOPE_CHOICES: list[tuple[ScopeChoice, str]] = [
    ("both", "Both labels and description (default)"),
    ("labels-only", "Only labels"),
    ("description-only", "Only description"),
]

LANGUAGE_CHOICES: list[Language] = ["en", "pl"]


def choose_repository(console: Console, repositories: list[str]) -> str:
    if not repositories:
        raise PublicError("No repositories found.")
    index = console.select("Select a repository:", repositories)
    return repositories[index]


def choose_template(console: Console, names: list[str]) -> str:
    """Pick a label template; a single available template is used without asking."""
    if len(names) == 1:
        return names[0]
    rows = [
        f"{name} (default template)" if name == DEFAULT_TEMPLATE_NAME else name for name in names
    ]
    index = console.select("Select a label template:", rows)
    return names[index]


def choose_labels_to_add(console: Console, labels: list[Label]) -> list[Label]:
    if not labels:
        raise PublicError("No labels found in this template.")
    rows = [f"{label.name} - {label.description}" for label in labels]
    indexes = console.select_many("Select labels to add:", rows)
    if not indexes:
        raise PublicError("No labels were selected.")
    return [labels[i] for i in indexes]


def choose_labels_to_remove(console: Console, labels: list[Label]) -> list[str]:
    if not labels:
        raise PublicError("No labels found in this repository.")
    rows = [f"{label.name} - {label.description}" for label in labels]
    indexes = console.select_many("Select labels to remove:", rows)
    if not indexes:
        raise PublicError("No labels were selected for removal.")
    return [labels[i].name for i in indexes]


def choose_pull_request(console: Console, pull_requests: list[PullRequestSummary]) -> int:
    """Return the number of the chosen pull request."""
    rows = [f"#{pr.number}: {pr.title}" for pr in pull_requests]
    index = console.select("Select a pull request:", rows)
    return pull_requests[index].number


def choose_issue(console: Console, issues: list[IssueSummary]) -> int:
    """Return the number of the chosen issue."""
    rows = [f"#{issue.number}: {issue.title}" for issue in issues]
    index = console.select("Select an issue:", rows)
    return issues[index].number


def confirm_apply(console: Console, entity: str) -> bool:
    return console.confirm(f"Would you like to apply these changes to the {entity}?", default=True)


def choose_language(console: Console) -> Language:
    index = console.select(
        "Which language version would you like to use for the description?",
        [LANGUAGE_NAMES[language] for language in LANGUAGE_CHOICES],
    )
    return LANGUAGE_CHOICES[index]


def choose_apply_scope(console: Console) -> SelectiveOptions:
    index = console.select(
        "What would you like to apply with AI suggestions?",
        [label for _, label in SCOPE_CHOICES],
    )
    return options_for_scope_choice(SCOPE_CHOICES[index][0])


def choose_action(console: Console) -> MenuAction:
    index = console.select("What would you like to do?", [label for _, label in MENU_ACTIONS])
    return MENU_ACTIONS[index][0]


def ask_github_token(console: Console) -> str:
    return console.prompt_secret("Please enter your GitHub Personal Access Token:")
