"""Status command for installed MCP servers."""

import click
from rich.table import Table
from rich.text import Text

from aicraft.cli.output import table_console, user_output, warning
from aicraft.context import AicraftContext
from aicraft.error_boundary import cli_error_boundary
from aicraft.io.mcp_json import load_mcp_config
from aicraft.io.state import load_local_config


def show_installed_mcps(ctx: AicraftContext) -> None:
    config = load_local_config(ctx.workspace.local_config_path)
    if not config.installed_mcps:
        user_output(warning("No MCP servers installed"))
        return

    servers = load_mcp_config(ctx.workspace.mcp_config_path).mcp_servers

    table = Table(title="Installed MCP Servers", show_header=True, header_style="bold")
    table.add_column("name", no_wrap=True, style="blue")
    table.add_column("package")
    table.add_column("installed", no_wrap=True)
    table.add_column("command")
    for record in config.installed_mcps:
        entry = servers.get(record.name)
        if entry is None:
            command = "(missing from .mcp.json)"
        elif not isinstance(entry, dict):
            command = str(entry)
        else:
            command = " ".join([str(entry.get("command", "")), *map(str, entry.get("args", []))])
        table.add_row(
            Text(record.name),
            Text(record.package or ""),
            Text(record.installed_at[:10]),
            Text(command),
        )
    table_console().print(table)


@click.command()
@click.pass_obj
@cli_error_boundary
def status(ctx: AicraftContext) -> None:
    """Show installed MCP servers."""
    show_installed_mcps(ctx)
