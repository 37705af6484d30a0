import logging
from pathlib import Path

import click

from aicraft.cli.alias import AliasedGroup, register_with_aliases
from aicraft.cli.output import user_output
from aicraft.context import create_context
from aicraft.error_boundary import cli_error_boundary
from aicraft.version import __version__

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])

# Track whether commands are registered
_commands_registered = False


class LazyGroup(AliasedGroup):
    """Click Group that lazily loads commands."""

    def list_commands(self, ctx):
        """List available commands, registering them if needed."""
        if not _commands_registered:
            _register_commands()
        return super().list_commands(ctx)

    def get_command(self, ctx, cmd_name):
        """Get a command by name, registering if needed."""
        if not _commands_registered:
            _register_commands()
        return super().get_command(ctx, cmd_name)


def configure_logging(debug: bool) -> None:
    """Route warnings to stderr, and everything under --debug."""
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")
    else:
        logging.basicConfig(level=logging.WARNING, format="Warning: %(message)s")


@click.command(cls=LazyGroup, invoke_without_command=True, context_settings=CONTEXT_SETTINGS)
@click.version_option(version=__version__)
@click.option(
    "--project-dir",
    type=click.Path(file_okay=False, path_type=Path),
    envvar="AICRAFT_PROJECT_DIR",
    help="Project to install into (default: current directory)",
)
@click.option(
    "--assets-dir",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    envvar="AICRAFT_ASSETS_DIR",
    help="Catalog to install from (default: the bundled catalog)",
)
@click.option(
    "--debug",
    is_flag=True,
    envvar="AICRAFT_DEBUG",
    help="Show debug logs and full stack traces",
)
@click.option(
    "-l", "--list", "list_catalog", is_flag=True, help="List all available agents and docs"
)
@click.pass_context
def cli(
    click_ctx: click.Context,
    project_dir: Path | None,
    assets_dir: Path | None,
    debug: bool,
    list_catalog: bool,
) -> None:
    """AI agent package manager for Claude.

    Run without a command for an interactive menu.
    """
    configure_logging(debug)

    # Only create context if not already provided (e.g., by tests)
    if click_ctx.obj is None:
        click_ctx.obj = create_context(
            project_root=project_dir,
            assets_root=assets_dir,
            debug=debug,
        )

    if click_ctx.invoked_subcommand is not None:
        return

    from aicraft.cli.menu import run_main_menu
    from aicraft.commands.list_cmd import show_catalog

    if list_catalog:
        cli_error_boundary(show_catalog)(click_ctx.obj)
        return

    user_output(click.style("\nAICraft - AI Agent Manager\n", fg="cyan", bold=True))
    cli_error_boundary(run_main_menu)(click_ctx.obj)


def _register_commands() -> None:
    """Register all commands with the CLI group."""
    global _commands_registered

    if _commands_registered:
        return

    # Set first so get_command calls made during registration don't recurse
    _commands_registered = True

    from aicraft.commands.create import create
    from aicraft.commands.docs import docs
    from aicraft.commands.init import init
    from aicraft.commands.install import install
    from aicraft.commands.installed import installed
    from aicraft.commands.list_cmd import list_cmd
    from aicraft.commands.mcp.group import mcp_group

    register_with_aliases(cli, list_cmd, "ls")
    register_with_aliases(cli, install, "i")
    register_with_aliases(cli, create, "new")
    register_with_aliases(cli, installed, "status")
    cli.add_command(init)
    cli.add_command(docs)
    cli.add_command(mcp_group, name="mcp")


def main() -> None:
    """Entry point with error boundary."""
    cli_error_boundary(cli)()
