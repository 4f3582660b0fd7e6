"""Selective application of AI suggestions.

Users can restrict a suggestion run to labels or to the description. The
flags combine permissively: asking for both "only" variants applies both.
"""

from dataclasses import dataclass
from typing import Literal

from gh_labels.errors import PublicError

ScopeChoice = Literal["both", "labels-only", "description-only"]

ALL_FEATURES_DISABLED_MESSAGE = (
    "At least one feature must be enabled. Cannot disable all options."
)


@dataclass(frozen=True)
class SelectiveOptions:
    """Raw selective flags as given on the command line."""

    labels_only: bool = False
    description_only: bool = False
    no_labels: bool = False
    no_description: bool = False


@dataclass(frozen=True)
class ApplyScope:
    """Which parts of a suggestion will be applied."""

    apply_labels: bool
    apply_description: bool

    @property
    def feature_names(self) -> list[str]:
        names: list[str] = []
        if self.apply_labels:
            names.append("labels")
        if self.apply_description:
            names.append("description")
        return names


def resolve_apply_scope(options: SelectiveOptions) -> ApplyScope:
    """Resolve selective flags into the labels/description pair.

    Raises:
        PublicError: If both features resolve to disabled
    """
    apply_labels = not options.no_labels and (
        options.labels_only or not options.description_only
    )
    apply_description = not options.no_description and (
        options.description_only or not options.labels_only
    )

    if not apply_labels and not apply_description:
        raise PublicError(ALL_FEATURES_DISABLED_MESSAGE)

    return ApplyScope(apply_labels=apply_labels, apply_description=apply_description)


def options_for_scope_choice(choice: ScopeChoice) -> SelectiveOptions:
    """Translate the interactive scope menu choice into SelectiveOptions."""
    if choice == "labels-only":
        return SelectiveOptions(labels_only=True)
    if choice == "description-only":
        return SelectiveOptions(description_only=True)
    return SelectiveOptions()
