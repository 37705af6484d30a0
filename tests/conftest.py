"""Shared fixtures: a small catalog and an empty project in tmp_path."""

import json
from collections.abc import Callable
from pathlib import Path

import pytest
from click.testing import CliRunner

from aicraft.context import AicraftContext
from aicraft.integrations.clock.fake import FakeClock
from aicraft.integrations.prompter.fake import FakePrompter

TEMPLATE = """# {{PROJECT_NAME}}

{{PROJECT_DESCRIPTION}}

## Sub Agents

{{SUB_AGENTS}}

## Installed Agents

{{INSTALLED_AGENTS}}

## Documentation

{{INSTALLED_DOCS}}
"""

VISUAL_SECTION = """## Visual Development & Testing

Check every UI change in a browser.

```bash
# Option 1: Use the slash command
/design-review
```

## Additional Context

- Design principles: `/context/design-principles.md`

"""


def _write_json(path: Path, data: object) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")


def write_catalog(root: Path) -> Path:
    """Write a minimal catalog under ``root`` and return it."""
    agents = root / "agents"
    _write_json(
        agents / "registry.json",
        {
            "version": "1.0.0",
            "agents": [
                {
                    "name": "alpha",
                    "filename": "alpha.md",
                    "description": "Alpha helper",
                    "model": "sonnet",
                    "color": "green",
                    "tags": ["one"],
                    "mcps": ["token-server", "plain-server"],
                },
                {
                    "name": "design-review",
                    "filename": "design-review.md",
                    "description": "Reviews UI changes",
                    "model": "opus",
                    "color": "magenta",
                    "tags": ["ui"],
                    "mcps": ["plain-server"],
                },
                {
                    "name": "loner",
                    "filename": "loner.md",
                    "description": "No dependencies",
                    "tags": [],
                    "mcps": [],
                },
            ],
        },
    )
    (agents / "alpha.md").write_text("---\nname: alpha\n---\n\n# Alpha\n", encoding="utf-8")
    (agents / "design-review.md").write_text(
        "---\nname: design-review\ndescription: Reviews UI changes\ncolor: magenta\n---\n\n# DR\n",
        encoding="utf-8",
    )
    (agents / "loner.md").write_text("# Loner\n", encoding="utf-8")
    _write_json(
        agents / "mcp-registry.json",
        {
            "version": "1.0.0",
            "mcpServers": {
                "token-server": {
                    "name": "token-server",
                    "type": "stdio",
                    "command": "npx",
                    "args": ["token-server", "--key=${TOKEN}"],
                    "env": {"KEY": "${TOKEN}"},
                },
                "plain-server": {
                    "name": "plain-server",
                    "type": "stdio",
                    "command": "uvx",
                    "args": ["plain-server"],
                    "env": {},
                },
            },
        },
    )
    (agents / "CLAUDE.md.template").write_text(TEMPLATE, encoding="utf-8")

    docs = root / "docs"
    _write_json(
        docs / "registry.json",
        {
            "version": "1.0.0",
            "docs": [
                {
                    "name": "guide",
                    "filename": "guide.md",
                    "description": "How to deploy",
                    "tags": ["deploy"],
                }
            ],
        },
    )
    (docs / "guide.md").write_text("# Guide\n\nDeploy it.\n", encoding="utf-8")

    mcps = root / "mcps"
    _write_json(
        mcps / "registry.json",
        {
            "mcps": [
                {
                    "name": "plain-server",
                    "description": "Plain server",
                    "package": "plain-server-pkg",
                    "category": "testing",
                    "setup_guide": "guides/plain-server.md",
                    "tags": ["plain"],
                },
                {
                    "name": "embedded",
                    "description": "Only described by its own installation block",
                    "package": "embedded-pkg",
                    "category": "misc",
                    "tags": [],
                    "installation": {
                        "command": "npx",
                        "args": ["embedded"],
                        "config": {
                            "mcpServers": {
                                "embedded": {
                                    "type": "stdio",
                                    "command": "npx",
                                    "args": ["embedded", "--token", "${EMBED_TOKEN}"],
                                    "env": {},
                                }
                            }
                        },
                    },
                },
                {
                    "name": "undescribed",
                    "description": "Has no launch instructions anywhere",
                    "category": "misc",
                    "tags": [],
                },
            ]
        },
    )
    (mcps / "guides").mkdir(parents=True, exist_ok=True)
    (mcps / "guides" / "plain-server.md").write_text("# Plain server setup\n", encoding="utf-8")

    sections = root / "sections"
    sections.mkdir(parents=True, exist_ok=True)
    (sections / "visual-development.md").write_text(VISUAL_SECTION, encoding="utf-8")
    return root


@pytest.fixture
def assets_root(tmp_path: Path) -> Path:
    """A minimal catalog in a temporary directory."""
    return write_catalog(tmp_path / "assets")


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """An empty project directory."""
    root = tmp_path / "project"
    root.mkdir()
    return root


@pytest.fixture
def cli_runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def make_context(project_root: Path, assets_root: Path) -> Callable[..., AicraftContext]:
    """Factory for a context over the fixture project and catalog."""

    def factory(
        prompter: FakePrompter | None = None,
        clock: FakeClock | None = None,
    ) -> AicraftContext:
        return AicraftContext.for_test(
            project_root=project_root,
            assets_root=assets_root,
            prompter=prompter if prompter is not None else FakePrompter(),
            clock=clock,
        )

    return factory
