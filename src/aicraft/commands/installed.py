"""Installed command for showing the agents in this project."""

import click
import frontmatter
import yaml

from aicraft.cli.output import dim, user_output, warning
from aicraft.context import AicraftContext
from aicraft.error_boundary import cli_error_boundary
from aicraft.io.state import load_local_config
from aicraft.operations.install import resolve_record_location
from aicraft.operations.scaffold import AGENT_COLORS


def show_installed_agents(ctx: AicraftContext) -> None:
    config = load_local_config(ctx.workspace.local_config_path)
    if not config.installed_agents:
        user_output(warning("No agents installed"))
        return

    user_output(f"Installed {len(config.installed_agents)} agent(s):\n")
    for record in config.installed_agents:
        path = resolve_record_location(ctx.workspace, record.location)
        if not path.exists():
            user_output(click.style(f"• {record.name}", fg="red") + dim(" (file missing)"))
            user_output(f"  {dim('Location:')} {record.location}")
            continue

        # Tolerate hand-edited agent files with broken front matter
        try:
            metadata = frontmatter.load(str(path)).metadata
        except (yaml.YAMLError, UnicodeDecodeError):
            metadata = {}

        color = metadata.get("color")
        fg = color if color in AGENT_COLORS else "green"
        user_output(click.style("• ", fg=fg) + click.style(record.name, bold=True))
        if metadata.get("description"):
            user_output(f"  {dim(str(metadata['description']))}")
        user_output(f"  {dim('Location:')} {record.location}")
        user_output(f"  {dim('Installed:')} {record.installed_at[:10]}")


@click.command()
@click.pass_obj
@cli_error_boundary
def installed(ctx: AicraftContext) -> None:
    """Show agents installed in this project."""
    show_installed_agents(ctx)
