"""Interactive prompt abstraction.

Commands and install operations never call click's prompt functions directly.
They go through a Prompter taken from the context so tests can script the
answers with FakePrompter.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence


class Prompter(ABC):
    """Abstract interactive prompts for dependency injection."""

    @abstractmethod
    def select[T](self, message: str, choices: Sequence[tuple[str, T]]) -> T:
        """Ask the user to pick one of several labelled values.

        Args:
            message: Question shown above the choices
            choices: (label, value) pairs in display order

        Returns:
            The value of the chosen pair

        Raises:
            ValueError: If choices is empty
        """
        ...

    @abstractmethod
    def confirm(self, message: str, *, default: bool = False) -> bool:
        """Ask a yes/no question."""
        ...

    @abstractmethod
    def secret(self, message: str) -> str:
        """Read a masked, non-empty value such as an API key."""
        ...

    @abstractmethod
    def text(self, message: str, *, default: str | None = None) -> str:
        """Read a free-form line of text."""
        ...
