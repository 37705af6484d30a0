"""Scaffold new agent definitions for `aicraft create`."""

import re
from dataclasses import dataclass, field

import frontmatter

AGENT_NAME_PATTERN = re.compile(r"[a-z0-9-]+")
AGENT_MODELS = ("sonnet", "opus", "haiku", "gpt-4", "any")
AGENT_COLORS = ("green", "blue", "yellow", "red", "magenta", "cyan")

_AGENT_BODY = """# {name} Agent

{description}

## Instructions

Add your agent-specific instructions here.

## Core Expertise

Describe the agent's core areas of expertise.

## Guidelines

- Add specific guidelines for this agent
- Include best practices
- Define response format

## Examples

Provide examples of how this agent should respond to common queries.
"""


@dataclass(frozen=True)
class AgentScaffold:
    """Answers collected by `aicraft create`."""

    name: str
    description: str
    model: str = "sonnet"
    color: str = "green"
    tags: list[str] = field(default_factory=list)


def validate_agent_name(name: str) -> str:
    """Check an agent name is lowercase letters, digits and hyphens.

    Raises:
        ValueError: If the name has any other character
    """
    if not AGENT_NAME_PATTERN.fullmatch(name):
        raise ValueError("Name must be lowercase with hyphens only")
    return name


def parse_tags(raw: str) -> list[str]:
    return [tag.strip() for tag in raw.split(",") if tag.strip()]


def render_agent(scaffold: AgentScaffold) -> str:
    """Render the markdown file for a new agent, front matter included."""
    metadata: dict[str, object] = {
        "name": scaffold.name,
        "description": scaffold.description,
        "model": scaffold.model,
        "color": scaffold.color,
    }
    if scaffold.tags:
        metadata["tags"] = list(scaffold.tags)

    body = _AGENT_BODY.format(name=scaffold.name, description=scaffold.description)
    post = frontmatter.Post(body, **metadata)
    return frontmatter.dumps(post, sort_keys=False) + "\n"
