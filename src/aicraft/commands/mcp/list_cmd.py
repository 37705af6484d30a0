"""List command for the MCP server catalog."""

import click
from rich.table import Table
from rich.text import Text

from aicraft.cli.output import catalog_style, table_console, user_output, warning
from aicraft.context import AicraftContext
from aicraft.error_boundary import cli_error_boundary
from aicraft.io.catalog import load_mcp_items


def show_mcp_catalog(ctx: AicraftContext) -> None:
    items = load_mcp_items(ctx.workspace)
    if not items:
        user_output(warning("No MCP servers available"))
        return

    table = Table(title="Available MCP Servers", show_header=True, header_style="bold")
    table.add_column("name", no_wrap=True)
    table.add_column("description")
    table.add_column("category", no_wrap=True)
    table.add_column("technologies")
    table.add_column("required by")
    for item in items:
        table.add_row(
            Text(item.name, style=catalog_style(item.color, fallback="blue")),
            Text(item.description),
            Text(item.category or ""),
            Text(", ".join(item.technologies)),
            Text(", ".join(item.required_by), style="yellow"),
        )
    table_console().print(table)


@click.command(name="list")
@click.pass_obj
@cli_error_boundary
def list_cmd(ctx: AicraftContext) -> None:
    """List all available MCP servers."""
    show_mcp_catalog(ctx)
