"""MCP commands group."""

import click

from aicraft.cli.alias import AliasedGroup, register_with_aliases
from aicraft.commands.mcp.install import install
from aicraft.commands.mcp.list_cmd import list_cmd
from aicraft.commands.mcp.remove import remove
from aicraft.commands.mcp.status import status


@click.group(cls=AliasedGroup)
def mcp_group() -> None:
    """Manage MCP (Model Context Protocol) servers."""


register_with_aliases(mcp_group, list_cmd, "ls")
register_with_aliases(mcp_group, install, "i")
register_with_aliases(mcp_group, status, "installed")
register_with_aliases(mcp_group, remove, "rm")
