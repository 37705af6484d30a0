"""Tests for the mcp command group."""

import json
from collections.abc import Callable
from pathlib import Path

from click.testing import CliRunner

from aicraft.commands.mcp.group import mcp_group
from aicraft.context import AicraftContext
from aicraft.integrations.prompter.fake import FakePrompter
from aicraft.io.state import load_local_config

ContextFactory = Callable[..., AicraftContext]


def test_mcp_list(cli_runner: CliRunner, make_context: ContextFactory) -> None:
    result = cli_runner.invoke(mcp_group, ["list"], catch_exceptions=False, obj=make_context())

    assert result.exit_code == 0
    assert "Available MCP Servers" in result.output
    assert "plain-server" in result.output
    assert "embedded" in result.output


def test_mcp_ls_alias(cli_runner: CliRunner, make_context: ContextFactory) -> None:
    result = cli_runner.invoke(mcp_group, ["ls"], catch_exceptions=False, obj=make_context())

    assert result.exit_code == 0
    assert "Available MCP Servers" in result.output


def test_mcp_install_by_name(
    cli_runner: CliRunner, make_context: ContextFactory, project_root: Path
) -> None:
    """Test a named install writes every store and copies the setup guide."""
    result = cli_runner.invoke(
        mcp_group, ["install", "plain-server"], catch_exceptions=False, obj=make_context()
    )

    assert result.exit_code == 0, result.output
    assert 'MCP server "plain-server" installed successfully!' in result.output
    assert "Setup guide copied to docs/mcp-plain-server.md" in result.output
    assert "Category: testing" in result.output
    assert (project_root / "docs" / "mcp-plain-server.md").exists()
    settings = json.loads(
        (project_root / ".claude" / "settings.local.json").read_text(encoding="utf-8")
    )
    assert settings["enabledMcpjsonServers"] == ["plain-server"]


def test_mcp_install_unknown(cli_runner: CliRunner, make_context: ContextFactory) -> None:
    result = cli_runner.invoke(
        mcp_group, ["install", "ghost"], catch_exceptions=False, obj=make_context()
    )

    assert result.exit_code == 1
    assert 'Error: MCP server "ghost" not found' in result.output
    assert 'Run "aicraft mcp list"' in result.output


def test_mcp_install_without_launch_config(
    cli_runner: CliRunner, make_context: ContextFactory, project_root: Path
) -> None:
    result = cli_runner.invoke(
        mcp_group, ["install", "undescribed"], catch_exceptions=False, obj=make_context()
    )

    assert result.exit_code == 1
    assert "MCP server configuration not found for undescribed" in result.output
    assert not (project_root / ".mcp.json").exists()


def test_mcp_status_shows_command(
    cli_runner: CliRunner, make_context: ContextFactory
) -> None:
    cli_runner.invoke(
        mcp_group, ["install", "plain-server"], catch_exceptions=False, obj=make_context()
    )

    result = cli_runner.invoke(mcp_group, ["status"], catch_exceptions=False, obj=make_context())

    assert result.exit_code == 0
    assert "Installed MCP Servers" in result.output
    assert "plain-server" in result.output
    assert "2025-01-01" in result.output


def test_mcp_status_with_hand_edited_entry(
    cli_runner: CliRunner, make_context: ContextFactory, project_root: Path
) -> None:
    cli_runner.invoke(
        mcp_group, ["install", "plain-server"], catch_exceptions=False, obj=make_context()
    )
    config_path = project_root / ".mcp.json"
    config_path.write_text(json.dumps({"mcpServers": {"plain-server": "edited"}}), encoding="utf-8")

    result = cli_runner.invoke(mcp_group, ["status"], catch_exceptions=False, obj=make_context())

    assert result.exit_code == 0
    assert "edited" in result.output


def test_mcp_status_with_nothing_installed(
    cli_runner: CliRunner, make_context: ContextFactory
) -> None:
    result = cli_runner.invoke(
        mcp_group, ["installed"], catch_exceptions=False, obj=make_context()
    )

    assert result.exit_code == 0
    assert "No MCP servers installed" in result.output


def test_mcp_remove_confirmed(
    cli_runner: CliRunner, make_context: ContextFactory, project_root: Path
) -> None:
    """Test removal clears every store."""
    cli_runner.invoke(
        mcp_group, ["install", "plain-server"], catch_exceptions=False, obj=make_context()
    )
    ctx = make_context(prompter=FakePrompter(confirmations=[True]))

    result = cli_runner.invoke(mcp_group, ["rm", "plain-server"], catch_exceptions=False, obj=ctx)

    assert result.exit_code == 0
    assert 'MCP server "plain-server" removed successfully!' in result.output
    mcp_config = json.loads((project_root / ".mcp.json").read_text(encoding="utf-8"))
    assert mcp_config == {"mcpServers": {}}
    assert load_local_config(project_root / ".aicraft" / "config.json").installed_mcps == []


def test_mcp_remove_interactive_declined(
    cli_runner: CliRunner, make_context: ContextFactory, project_root: Path
) -> None:
    cli_runner.invoke(
        mcp_group, ["install", "plain-server"], catch_exceptions=False, obj=make_context()
    )
    prompter = FakePrompter(selections=[0], confirmations=[False])

    result = cli_runner.invoke(
        mcp_group, ["remove"], catch_exceptions=False, obj=make_context(prompter=prompter)
    )

    assert result.exit_code == 0
    assert "Kept plain-server" in result.output
    assert "plain-server" in json.loads(
        (project_root / ".mcp.json").read_text(encoding="utf-8")
    )["mcpServers"]


def test_mcp_remove_with_nothing_installed(
    cli_runner: CliRunner, make_context: ContextFactory
) -> None:
    result = cli_runner.invoke(mcp_group, ["remove"], catch_exceptions=False, obj=make_context())

    assert result.exit_code == 0
    assert "No MCP servers installed" in result.output


def test_mcp_remove_not_installed(cli_runner: CliRunner, make_context: ContextFactory) -> None:
    cli_runner.invoke(
        mcp_group, ["install", "plain-server"], catch_exceptions=False, obj=make_context()
    )

    result = cli_runner.invoke(
        mcp_group, ["remove", "other"], catch_exceptions=False, obj=make_context()
    )

    assert result.exit_code == 1
    assert 'Error: MCP server "other" is not installed' in result.output
