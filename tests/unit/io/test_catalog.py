"""Tests for catalog loading."""

import logging
from pathlib import Path

import pytest

from aicraft.context import Workspace
from aicraft.errors import AssetNotFoundError
from aicraft.io.catalog import (
    find_agent,
    find_mcp_item,
    load_agents,
    load_claude_template,
    load_docs,
    load_mcp_items,
    load_mcp_servers,
)


def _workspace(tmp_path: Path, assets_root: Path) -> Workspace:
    return Workspace(project_root=tmp_path, assets_root=assets_root)


def test_load_agents_from_manifest(tmp_path: Path, assets_root: Path) -> None:
    """Test agents are read from agents/registry.json in order."""
    agents = load_agents(_workspace(tmp_path, assets_root))

    assert [agent.name for agent in agents] == ["alpha", "design-review", "loner"]
    alpha = find_agent(agents, "alpha")
    assert alpha is not None
    assert alpha.mcps == ["token-server", "plain-server"]
    assert alpha.tags == ["one"]


def test_load_agents_defaults_optional_fields(tmp_path: Path, assets_root: Path) -> None:
    """Test missing model and color fall back to defaults."""
    loner = find_agent(load_agents(_workspace(tmp_path, assets_root)), "loner")

    assert loner is not None
    assert loner.model == "sonnet"
    assert loner.mcps == []


def test_load_agents_falls_back_to_front_matter(tmp_path: Path) -> None:
    """Test agents are discovered from markdown front matter without a manifest."""
    agents_dir = tmp_path / "assets" / "agents"
    agents_dir.mkdir(parents=True)
    (agents_dir / "b.md").write_text(
        "---\nname: beta\ndescription: Beta agent\ntags: x, y\n---\nBody\n", encoding="utf-8"
    )
    (agents_dir / "a.md").write_text("---\nname: aardvark\n---\nBody\n", encoding="utf-8")
    (agents_dir / "notes.md").write_text("No front matter\n", encoding="utf-8")

    agents = load_agents(_workspace(tmp_path, tmp_path / "assets"))

    assert [(agent.name, agent.filename) for agent in agents] == [
        ("aardvark", "a.md"),
        ("beta", "b.md"),
    ]
    assert agents[0].description == ""
    assert agents[0].tags == []
    assert agents[1].tags == ["x", "y"]


def test_load_docs_falls_back_to_markdown_files(tmp_path: Path) -> None:
    """Test docs without a manifest are named after their files."""
    docs_dir = tmp_path / "assets" / "docs"
    docs_dir.mkdir(parents=True)
    (docs_dir / "deploy.md").write_text("# Deploy\n", encoding="utf-8")

    docs = load_docs(_workspace(tmp_path, tmp_path / "assets"))

    assert len(docs) == 1
    assert docs[0].name == "deploy"
    assert docs[0].description == "Documentation guide"
    assert docs[0].filename == "deploy.md"


def test_corrupt_manifest_yields_empty_catalog_and_warning(
    tmp_path: Path, assets_root: Path, caplog: pytest.LogCaptureFixture
) -> None:
    """Test that an unreadable manifest does not abort loading."""
    (assets_root / "agents" / "registry.json").write_text("{broken", encoding="utf-8")

    with caplog.at_level(logging.WARNING):
        agents = load_agents(_workspace(tmp_path, assets_root))

    assert agents == []
    assert "Could not load agent catalog" in caplog.text


def test_missing_catalog_directory_yields_empty_catalog(tmp_path: Path) -> None:
    """Test an absent catalog is simply empty."""
    workspace = _workspace(tmp_path, tmp_path / "nowhere")

    assert load_agents(workspace) == []
    assert load_docs(workspace) == []
    assert load_mcp_items(workspace) == []
    assert load_mcp_servers(workspace) == {}


def test_load_mcp_servers_from_registry(tmp_path: Path, assets_root: Path) -> None:
    """Test MCP descriptors are keyed by server name."""
    servers = load_mcp_servers(_workspace(tmp_path, assets_root))

    assert set(servers) == {"token-server", "plain-server"}
    assert servers["token-server"].env == {"KEY": "${TOKEN}"}
    assert servers["plain-server"].args == ["plain-server"]


def test_load_mcp_servers_falls_back_to_item_templates(tmp_path: Path, assets_root: Path) -> None:
    """Test descriptors come from MCP items when mcp-registry.json is absent."""
    (assets_root / "agents" / "mcp-registry.json").unlink()

    servers = load_mcp_servers(_workspace(tmp_path, assets_root))

    assert list(servers) == ["embedded"]
    assert servers["embedded"].args == ["embedded", "--token", "${EMBED_TOKEN}"]


def test_load_mcp_items(tmp_path: Path, assets_root: Path) -> None:
    """Test MCP items keep their optional fields."""
    items = load_mcp_items(_workspace(tmp_path, assets_root))

    plain = find_mcp_item(items, "plain-server")
    assert plain is not None
    assert plain.package == "plain-server-pkg"
    assert plain.setup_guide == "guides/plain-server.md"
    assert plain.installation is None
    assert find_mcp_item(items, "missing") is None


def test_load_claude_template_missing_raises(tmp_path: Path, assets_root: Path) -> None:
    """Test a missing template is a hard error for the command."""
    (assets_root / "agents" / "CLAUDE.md.template").unlink()

    with pytest.raises(AssetNotFoundError, match="Template file not found"):
        load_claude_template(_workspace(tmp_path, assets_root))
