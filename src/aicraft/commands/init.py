"""Init command for generating CLAUDE.md."""

import click

from aicraft.cli.output import dim, success, user_output
from aicraft.context import AicraftContext
from aicraft.error_boundary import cli_error_boundary
from aicraft.operations.install import init_project


@click.command()
@click.pass_obj
@cli_error_boundary
def init(ctx: AicraftContext) -> None:
    """Initialize CLAUDE.md for the Claude Code workflow.

    What gets created:
    - CLAUDE.md: generated from the bundled template, listing installed
      agents and docs
    - docs/: a copy of every bundled documentation guide

    Running init again regenerates CLAUDE.md, replacing manual edits.
    """
    result = init_project(ctx)

    if result.copied_docs:
        count = len(result.copied_docs)
        user_output(success(f"Documentation copied to ./docs/ ({count} file(s))"))
    user_output(success("CLAUDE.md and documentation created successfully!"))
    user_output(dim(f"Location: {result.document.path}"))
    user_output("\nNext steps:")
    user_output("1. Review the CLAUDE.md file and customize as needed")
    user_output("2. Install agents with: aicraft install [agent-name]")
    user_output("3. Start using Claude Code with your configured agents")
