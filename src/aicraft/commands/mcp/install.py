"""Install command for standalone MCP servers."""

import click

from aicraft.cli.output import dim, user_output
from aicraft.commands.install import report_install
from aicraft.context import AicraftContext
from aicraft.error_boundary import cli_error_boundary
from aicraft.operations.install import install_mcp_item, select_mcp_item


@click.command()
@click.argument("name", required=False)
@click.pass_obj
@cli_error_boundary
def install(ctx: AicraftContext, name: str | None) -> None:
    """Install an MCP server into .mcp.json and enable it.

    Servers that need API keys prompt for them; input is masked.
    """
    item = select_mcp_item(ctx, name)
    result = install_mcp_item(ctx, item)
    report_install(result)
    if result.installed:
        if item.category:
            user_output(dim(f"Category: {item.category}"))
        if item.homepage:
            user_output(dim(f"Homepage: {item.homepage}"))
