"""Interactive menu shown when aicraft runs without a command."""

from collections.abc import Callable

import click

from aicraft.cli.output import dim, user_output
from aicraft.commands.create import create
from aicraft.commands.docs import list_docs
from aicraft.commands.install import report_install
from aicraft.commands.installed import show_installed_agents
from aicraft.commands.init import init
from aicraft.commands.list_cmd import show_catalog
from aicraft.commands.mcp.install import install as mcp_install
from aicraft.commands.mcp.list_cmd import show_mcp_catalog
from aicraft.commands.mcp.remove import remove_interactively
from aicraft.commands.mcp.status import show_installed_mcps
from aicraft.context import AicraftContext
from aicraft.operations.install import install_by_name


def _invoke(command: click.Command) -> None:
    click.get_current_context().invoke(command)


def run_mcp_menu(ctx: AicraftContext) -> None:
    actions: list[tuple[str, Callable[[], None] | None]] = [
        ("List available MCP servers", lambda: show_mcp_catalog(ctx)),
        ("Install MCP server", lambda: _invoke(mcp_install)),
        ("Show installed MCP servers", lambda: show_installed_mcps(ctx)),
        ("Remove MCP server", lambda: remove_interactively(ctx, None)),
        ("Back to main menu", None),
    ]
    action = ctx.prompter.select("MCP Server Management:", actions)
    if action is not None:
        action()


def run_main_menu(ctx: AicraftContext) -> None:
    actions: list[tuple[str, Callable[[], None] | None]] = [
        ("Initialize project", lambda: _invoke(init)),
        ("Browse available agents", lambda: show_catalog(ctx)),
        ("Install an agent", lambda: report_install(install_by_name(ctx, None))),
        ("Manage MCP servers", lambda: run_mcp_menu(ctx)),
        ("Create new agent", lambda: _invoke(create)),
        ("Show installed agents", lambda: show_installed_agents(ctx)),
        ("Show documentation", lambda: list_docs(ctx)),
        ("Exit", None),
    ]
    action = ctx.prompter.select("What would you like to do?", actions)
    if action is None:
        user_output(dim("Goodbye!"))
        return
    action()
