"""Create command for scaffolding a new agent."""

import click

from aicraft.cli.output import dim, success, user_output
from aicraft.context import AicraftContext
from aicraft.error_boundary import cli_error_boundary
from aicraft.operations.scaffold import (
    AGENT_COLORS,
    AGENT_MODELS,
    AgentScaffold,
    parse_tags,
    render_agent,
    validate_agent_name,
)


def _ask_name(ctx: AicraftContext) -> str:
    while True:
        name = ctx.prompter.text("Agent name")
        try:
            return validate_agent_name(name)
        except ValueError as e:
            user_output(str(e))


def _validate_name_option(
    click_ctx: click.Context, param: click.Parameter, value: str | None
) -> str | None:
    if value is None:
        return None
    try:
        return validate_agent_name(value)
    except ValueError as e:
        raise click.BadParameter(str(e)) from e


@click.command()
@click.option("--name", callback=_validate_name_option, help="Agent name (lowercase, hyphens)")
@click.option("--description", help="One-line description of the agent")
@click.option("--model", type=click.Choice(AGENT_MODELS), help="Preferred model")
@click.option("--color", type=click.Choice(AGENT_COLORS), help="Theme color")
@click.option("--tags", help="Comma-separated tags")
@click.pass_obj
@cli_error_boundary
def create(
    ctx: AicraftContext,
    name: str | None,
    description: str | None,
    model: str | None,
    color: str | None,
    tags: str | None,
) -> None:
    """Create a new agent in .claude/agents/.

    Any option left out is asked for interactively.
    """
    prompter = ctx.prompter
    if name is None:
        name = _ask_name(ctx)
    if description is None:
        description = prompter.text("Agent description", default="")
    if model is None:
        model = prompter.select("Model preference:", [(choice, choice) for choice in AGENT_MODELS])
    if color is None:
        color = prompter.select("Theme color:", [(choice, choice) for choice in AGENT_COLORS])
    if tags is None:
        tags = prompter.text("Tags (comma-separated)", default="")

    path = ctx.workspace.user_agents_dir / f"{name}.md"
    overwrite_prompt = f'Agent file "{path.name}" already exists. Overwrite?'
    if path.exists() and not prompter.confirm(overwrite_prompt):
        user_output(dim(f"Skipped {name}"))
        return

    scaffold = AgentScaffold(
        name=name,
        description=description,
        model=model,
        color=color,
        tags=parse_tags(tags),
    )
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render_agent(scaffold), encoding="utf-8")

    user_output(success(f'Agent "{name}" created successfully!'))
    user_output(dim(f"Location: {path}"))
    user_output("\nNext steps:")
    user_output("1. Edit the agent file to add detailed instructions")
    user_output("2. Test the agent in your Claude environment")
    user_output("3. Submit a PR to share your agent with the community")
