"""Install command for agents and docs."""

import click

from aicraft.cli.output import dim, success, user_output, warning
from aicraft.context import AicraftContext
from aicraft.error_boundary import cli_error_boundary
from aicraft.models.results import DocumentUpdate, InstallResult
from aicraft.operations.install import install_by_name


def report_document(document: DocumentUpdate | None, updated_message: str) -> None:
    """Tell the user what happened to CLAUDE.md."""
    if document is None:
        return
    if document.changed:
        user_output(success(updated_message))
    elif document.status == "missing":
        user_output(warning('CLAUDE.md not found. Run "aicraft init" to create it.'))


def report_install(result: InstallResult) -> None:
    if not result.installed:
        user_output(dim(f"Skipped {result.name}"))
        return

    label = {"agent": "Agent", "doc": "Documentation", "mcp": "MCP server"}[result.kind]
    user_output(success(f'{label} "{result.name}" installed successfully!'))
    if result.location is not None:
        user_output(dim(f"Location: {result.location}"))
    if result.kind == "agent" and result.mcp_servers:
        user_output(success(f"Installed MCP servers: {', '.join(result.mcp_servers)}"))
    if result.skipped_mcp_servers:
        skipped = ", ".join(result.skipped_mcp_servers)
        user_output(warning(f"Skipped MCP servers missing from the catalog: {skipped}"))
    if result.setup_guide is not None:
        user_output(success(f"Setup guide copied to docs/{result.setup_guide.name}"))

    if result.kind == "agent":
        report_document(result.document, "Updated CLAUDE.md with agent configuration")
    else:
        report_document(result.document, f"Added {result.name} reference to CLAUDE.md")
        if result.document is not None and result.document.status == "unchanged":
            user_output(dim(f"{result.name} is already referenced in CLAUDE.md"))


@click.command()
@click.argument("name", required=False)
@click.pass_obj
@cli_error_boundary
def install(ctx: AicraftContext, name: str | None) -> None:
    """Install an agent to .claude/agents/ or a doc to docs/.

    Without NAME, pick from the catalog interactively.

    Examples:

        aicraft install design-review

        aicraft install
    """
    report_install(install_by_name(ctx, name))
