"""List command for showing the agent and doc catalogs."""

import click
from rich.table import Table
from rich.text import Text

from aicraft.cli.output import catalog_style, table_console, user_output, warning
from aicraft.context import AicraftContext
from aicraft.error_boundary import cli_error_boundary
from aicraft.io.catalog import load_agents, load_docs
from aicraft.models.catalog import Agent, Doc


def _tags(tags: list[str]) -> Text:
    return Text(" ".join(f"#{tag}" for tag in tags), style="blue")


def _agents_table(agents: list[Agent]) -> Table:
    table = Table(title="Available Agents", show_header=True, header_style="bold")
    table.add_column("name", no_wrap=True)
    table.add_column("description")
    table.add_column("model", no_wrap=True)
    table.add_column("mcps")
    table.add_column("tags")
    for agent in agents:
        table.add_row(
            Text(agent.name, style=catalog_style(agent.color)),
            Text(agent.description),
            Text(agent.model),
            Text(", ".join(agent.mcps), style="magenta"),
            _tags(agent.tags),
        )
    return table


def _docs_table(docs: list[Doc]) -> Table:
    table = Table(title="Available Documentation", show_header=True, header_style="bold")
    table.add_column("name", no_wrap=True)
    table.add_column("description")
    table.add_column("tags")
    for doc in docs:
        table.add_row(
            Text(doc.name, style=catalog_style(doc.color, fallback="cyan")),
            Text(doc.description),
            _tags(doc.tags),
        )
    return table


def show_catalog(ctx: AicraftContext) -> None:
    agents = load_agents(ctx.workspace)
    docs = load_docs(ctx.workspace)

    if not agents and not docs:
        user_output(warning("No agents or documentation available"))
        return

    console = table_console()
    if agents:
        console.print(_agents_table(agents))
    if docs:
        console.print(_docs_table(docs))
        user_output("Read a doc with: aicraft docs <name>")


@click.command(name="list")
@click.pass_obj
@cli_error_boundary
def list_cmd(ctx: AicraftContext) -> None:
    """List all available agents and docs."""
    show_catalog(ctx)
