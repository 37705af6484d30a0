"""Command aliases (`ls` for `list`, `rm` for `remove`, ...)."""

import click


class AliasedGroup(click.Group):
    """Click group that resolves short aliases to their commands.

    Aliases are not listed separately in --help; they are shown next to the
    command they point at.
    """

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._aliases: dict[str, str] = {}

    def add_alias(self, alias: str, command_name: str) -> None:
        self._aliases[alias] = command_name

    def resolve_alias(self, name: str) -> str:
        return self._aliases.get(name, name)

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        return super().get_command(ctx, self.resolve_alias(cmd_name))

    def format_commands(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        aliases_by_command: dict[str, list[str]] = {}
        for alias, command_name in self._aliases.items():
            aliases_by_command.setdefault(command_name, []).append(alias)

        rows: list[tuple[str, str]] = []
        for name in self.list_commands(ctx):
            command = self.get_command(ctx, name)
            if command is None or command.hidden:
                continue
            label = name
            if name in aliases_by_command:
                label = f"{name} ({', '.join(aliases_by_command[name])})"
            rows.append((label, command.get_short_help_str(limit=formatter.width)))

        if rows:
            with formatter.section("Commands"):
                formatter.write_dl(rows)


def register_with_aliases(group: AliasedGroup, command: click.Command, *aliases: str) -> None:
    """Add ``command`` to ``group`` and make each alias resolve to it."""
    group.add_command(command)
    assert command.name is not None
    for alias in aliases:
        group.add_alias(alias, command.name)
