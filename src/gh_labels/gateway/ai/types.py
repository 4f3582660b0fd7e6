"""Suggestion types returned by the AI gateway."""

from dataclasses import dataclass
from typing import Literal

Language = Literal["en", "pl"]

LANGUAGE_NAMES: dict[Language, str] = {
    "en": "English",
    "pl": "Polish",
}


@dataclass(frozen=True)
class LabelSuggestion:
    """A label proposed for a pull request or issue.

    Attributes:
        name: Label name
        description: Why the label fits
        confidence: Relevance score in [1, 100]
        is_new: True when the label does not exist in the repository yet
    """

    name: str
    description: str
    confidence: int
    is_new: bool


@dataclass(frozen=True)
class DescriptionSuggestion:
    """A proposed body text in one language."""

    content: str
    confidence: int


@dataclass(frozen=True)
class ContentSuggestion:
    """Labels plus an English and a Polish body proposal.

    A description variant is None only when the AI service left it out;
    workflows reject such suggestions before showing them.
    """

    labels: list[LabelSuggestion]
    description_en: DescriptionSuggestion | None
    description_pl: DescriptionSuggestion | None

    def description_for(self, language: Language) -> DescriptionSuggestion | None:
        if language == "en":
            return self.description_en
        return self.description_pl
