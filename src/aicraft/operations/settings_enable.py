"""Keep the enabled-server list in .claude/settings.local.json in step with .mcp.json."""

from collections.abc import Sequence
from pathlib import Path

from aicraft.io.settings_json import modify_settings
from aicraft.models.settings import ProjectSettings


def enable_servers(settings: ProjectSettings, names: Sequence[str]) -> ProjectSettings:
    """Return new settings with ``names`` enabled.

    Names already present are skipped, so the list never holds duplicates
    and keeps its order. The enable-all flag is always switched on.
    """
    enabled = list(settings.enabled_servers)
    for name in names:
        if name not in enabled:
            enabled.append(name)
    return settings.model_copy(
        update={"enabled_servers": enabled, "enable_all_project_servers": True}
    )


def disable_server(settings: ProjectSettings, name: str) -> ProjectSettings:
    """Return new settings with ``name`` removed from the enabled list."""
    enabled = [existing for existing in settings.enabled_servers if existing != name]
    return settings.model_copy(update={"enabled_servers": enabled})


def enable_mcp_servers(settings_path: Path, names: Sequence[str]) -> ProjectSettings:
    """Enable servers in the settings file, creating it if needed.

    Returns:
        The settings that were written
    """
    with modify_settings(settings_path) as (loaded, save):
        updated = enable_servers(loaded.value, names)
        save(updated)
    return updated


def disable_mcp_server(settings_path: Path, name: str) -> bool:
    """Remove one server from the settings file's enabled list.

    Returns:
        True if the file listed the server and was rewritten
    """
    with modify_settings(settings_path) as (loaded, save):
        if loaded.used_default or name not in loaded.value.enabled_servers:
            return False
        save(disable_server(loaded.value, name))
    return True
