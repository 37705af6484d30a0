"""Remove command for installed MCP servers."""

import click

from aicraft.cli.output import dim, success, user_output, warning
from aicraft.context import AicraftContext
from aicraft.error_boundary import cli_error_boundary
from aicraft.io.state import load_local_config
from aicraft.operations.install import remove_mcp_item, select_installed_mcp


def remove_interactively(ctx: AicraftContext, name: str | None) -> None:
    config = load_local_config(ctx.workspace.local_config_path)
    if not config.installed_mcps:
        user_output(warning("No MCP servers installed"))
        return

    selected = select_installed_mcp(ctx, name)
    result = remove_mcp_item(ctx, selected)
    if result.status == "declined":
        user_output(dim(f"Kept {selected}"))
        return
    user_output(success(f'MCP server "{selected}" removed successfully!'))


@click.command()
@click.argument("name", required=False)
@click.pass_obj
@cli_error_boundary
def remove(ctx: AicraftContext, name: str | None) -> None:
    """Remove an installed MCP server.

    Deletes it from .mcp.json, the enabled list in
    .claude/settings.local.json and the install record.
    """
    remove_interactively(ctx, name)
