"""Merge MCP server entries into the project's .mcp.json."""

import logging
from pathlib import Path

from aicraft.integrations.prompter import Prompter
from aicraft.io.mcp_json import modify_mcp_config
from aicraft.models.mcp import McpServerDescriptor
from aicraft.operations.placeholders import find_placeholders, resolve_descriptor

logger = logging.getLogger(__name__)


def collect_secrets(prompter: Prompter, server_name: str, names: list[str]) -> dict[str, str]:
    """Prompt once per placeholder name for a masked, non-empty value."""
    return {name: prompter.secret(f"Enter {name} for {server_name}") for name in names}


def install_mcp_server(
    config_path: Path,
    prompter: Prompter,
    server_name: str,
    descriptor: McpServerDescriptor,
) -> McpServerDescriptor:
    """Write one server entry into .mcp.json.

    Placeholders in the descriptor are filled in interactively before the
    file is touched. Only the ``server_name`` key changes; every other entry
    is written back exactly as it was read. An unreadable .mcp.json is
    replaced by a fresh one.

    Args:
        config_path: Path to .mcp.json
        prompter: Used to ask for placeholder values
        server_name: Key under mcpServers
        descriptor: Server launch instructions, possibly with placeholders

    Returns:
        The resolved descriptor that was written
    """
    names = find_placeholders(descriptor)
    resolved = resolve_descriptor(descriptor, collect_secrets(prompter, server_name, names))

    with modify_mcp_config(config_path) as (loaded, save):
        if loaded.status == "corrupt":
            logger.warning("%s could not be read and will be rewritten", config_path.name)
        save(loaded.value.with_server(server_name, resolved.to_config_entry()))

    logger.debug("Wrote MCP server %s to %s", server_name, config_path)
    return resolved


def remove_mcp_server(config_path: Path, server_name: str) -> bool:
    """Delete one server entry from .mcp.json.

    A missing file, an unreadable file or an absent key all count as already
    removed and leave the file untouched.

    Returns:
        True if the file was rewritten without the server
    """
    with modify_mcp_config(config_path) as (loaded, save):
        if loaded.used_default or server_name not in loaded.value.mcp_servers:
            return False
        save(loaded.value.without_server(server_name))

    return True
