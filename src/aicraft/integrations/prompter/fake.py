"""Fake Prompter implementation for testing.

FakePrompter answers prompts from queues supplied to its constructor and
records every prompt it was asked, so tests can assert both on outcomes and
on how many questions the user saw.
"""

from collections.abc import Sequence

from aicraft.integrations.prompter.abc import Prompter


class FakePrompter(Prompter):
    """In-memory fake that replays scripted answers.

    This class has NO public setup methods. All state is provided via constructor
    or captured during execution.
    """

    def __init__(
        self,
        *,
        selections: list[int] | None = None,
        confirmations: list[bool] | None = None,
        secrets: list[str] | None = None,
        texts: list[str] | None = None,
    ) -> None:
        """Create FakePrompter with queued answers.

        Args:
            selections: Zero-based indexes returned by successive select() calls
            confirmations: Answers for successive confirm() calls. When exhausted,
                confirm() returns the prompt's default.
            secrets: Values returned by successive secret() calls
            texts: Values returned by successive text() calls. When exhausted,
                text() returns the prompt's default.
        """
        self._selections = list(selections) if selections is not None else []
        self._confirmations = list(confirmations) if confirmations is not None else []
        self._secrets = list(secrets) if secrets is not None else []
        self._texts = list(texts) if texts is not None else []
        self._prompts: list[tuple[str, str]] = []

    @property
    def prompts(self) -> list[tuple[str, str]]:
        """(kind, message) for every prompt shown, in order.

        This property is for test assertions only.
        """
        return self._prompts

    @property
    def secret_prompts(self) -> list[str]:
        """Messages of every secret() prompt shown."""
        return [message for kind, message in self._prompts if kind == "secret"]

    def select[T](self, message: str, choices: Sequence[tuple[str, T]]) -> T:
        self._prompts.append(("select", message))
        if not choices:
            raise ValueError(f"No choices available for: {message}")
        if not self._selections:
            raise ValueError(f"FakePrompter has no selection queued for: {message}")
        return choices[self._selections.pop(0)][1]

    def confirm(self, message: str, *, default: bool = False) -> bool:
        self._prompts.append(("confirm", message))
        if not self._confirmations:
            return default
        return self._confirmations.pop(0)

    def secret(self, message: str) -> str:
        self._prompts.append(("secret", message))
        if not self._secrets:
            raise ValueError(f"FakePrompter has no secret queued for: {message}")
        return self._secrets.pop(0)

    def text(self, message: str, *, default: str | None = None) -> str:
        self._prompts.append(("text", message))
        if self._texts:
            return self._texts.pop(0)
        if default is None:
            raise ValueError(f"FakePrompter has no text queued for: {message}")
        return default
