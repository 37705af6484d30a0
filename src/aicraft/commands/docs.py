"""Docs command for browsing bundled documentation."""

import click
from rich.table import Table
from rich.text import Text

from aicraft.cli.output import machine_output, table_console, user_output, warning
from aicraft.context import AicraftContext
from aicraft.error_boundary import cli_error_boundary
from aicraft.errors import ItemNotFoundError
from aicraft.io.catalog import doc_source_path, find_doc, load_docs, read_asset


def list_docs(ctx: AicraftContext) -> None:
    docs = load_docs(ctx.workspace)
    if not docs:
        user_output(warning("No documentation files found"))
        return

    table = Table(title="Available Documentation", show_header=True, header_style="bold")
    table.add_column("name", no_wrap=True, style="cyan")
    table.add_column("description")
    for doc in docs:
        table.add_row(Text(doc.name), Text(doc.description))
    table_console().print(table)
    user_output("Usage: aicraft docs <name>")


@click.command()
@click.argument("name", required=False)
@click.pass_obj
@cli_error_boundary
def docs(ctx: AicraftContext, name: str | None) -> None:
    """List bundled docs, or print the doc called NAME."""
    if name is None:
        list_docs(ctx)
        return

    doc = find_doc(load_docs(ctx.workspace), name)
    if doc is None:
        raise ItemNotFoundError(
            "Documentation", name, hint='Run "aicraft docs" to see available docs.'
        )
    machine_output(read_asset(doc_source_path(ctx.workspace, doc), "Documentation"), nl=False)
