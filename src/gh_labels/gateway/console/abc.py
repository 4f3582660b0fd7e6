"""Console operations abstraction.

All human interaction of the workflows goes through this interface so tests
can script the answers.
"""

from abc import ABC, abstractmethod


class Console(ABC):
    """Abstract blocking prompt operations for dependency injection."""

    @abstractmethod
    def select(self, message: str, choices: list[str]) -> int:
        """Ask the user to pick exactly one of the choices.

        Args:
            message: Question shown above the choices
            choices: Non-empty list of display rows

        Returns:
            Zero-based index of the chosen row

        Raises:
            PublicError: If the user cancels
        """
        ...

    @abstractmethod
    def select_many(self, message: str, choices: list[str]) -> list[int]:
        """Ask the user to pick any number of the choices.

        Args:
            message: Question shown above the choices
            choices: Non-empty list of display rows

        Returns:
            Zero-based indexes of the chosen rows in display order; may be empty

        Raises:
            PublicError: If the user cancels
        """
        ...

    @abstractmethod
    def confirm(self, message: str, *, default: bool) -> bool:
        """Ask a yes/no question.

        Raises:
            PublicError: If the user cancels
        """
        ...

    @abstractmethod
    def prompt_secret(self, message: str) -> str:
        """Ask for a non-empty value without echoing it.

        Raises:
            PublicError: If the user cancels
        """
        ...
