"""Prompter backed by click's terminal prompts."""

from collections.abc import Sequence

import click

from aicraft.integrations.prompter.abc import Prompter


def _require_non_empty(value: str) -> str:
    if not value.strip():
        raise click.BadParameter("Value cannot be empty")
    return value


class ClickPrompter(Prompter):
    """Production implementation using click.prompt and click.confirm.

    Prompts are written to stderr so stdout stays clean for data output.
    """

    def select[T](self, message: str, choices: Sequence[tuple[str, T]]) -> T:
        if not choices:
            raise ValueError(f"No choices available for: {message}")

        click.echo(message, err=True)
        for index, (label, _value) in enumerate(choices, start=1):
            click.echo(f"  {index}) {label}", err=True)

        picked = click.prompt(
            "Choice",
            type=click.IntRange(1, len(choices)),
            err=True,
        )
        return choices[picked - 1][1]

    def confirm(self, message: str, *, default: bool = False) -> bool:
        return click.confirm(message, default=default, err=True)

    def secret(self, message: str) -> str:
        # value_proc raising BadParameter makes click re-prompt
        return click.prompt(message, hide_input=True, value_proc=_require_non_empty, err=True)

    def text(self, message: str, *, default: str | None = None) -> str:
        return click.prompt(message, default=default, show_default=default is not None, err=True)
