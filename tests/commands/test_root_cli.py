"""Tests for the top-level aicraft group."""

from collections.abc import Callable
from pathlib import Path

from click.testing import CliRunner

from aicraft.cli import cli
from aicraft.context import AicraftContext
from aicraft.integrations.prompter.fake import FakePrompter
from aicraft.version import __version__

ContextFactory = Callable[..., AicraftContext]


def test_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output


def test_help_lists_commands_with_aliases(cli_runner: CliRunner) -> None:
    """Test aliases are shown next to their commands."""
    result = cli_runner.invoke(cli, ["--help"])

    assert result.exit_code == 0
    assert "list (ls)" in result.output
    assert "install (i)" in result.output
    assert "create (new)" in result.output
    assert "installed (status)" in result.output
    assert "mcp" in result.output


def test_list_flag_shows_catalog(cli_runner: CliRunner, make_context: ContextFactory) -> None:
    result = cli_runner.invoke(cli, ["-l"], catch_exceptions=False, obj=make_context())

    assert result.exit_code == 0
    assert "Available Agents" in result.output


def test_alias_dispatches_to_command(
    cli_runner: CliRunner, make_context: ContextFactory, project_root: Path
) -> None:
    result = cli_runner.invoke(cli, ["i", "loner"], catch_exceptions=False, obj=make_context())

    assert result.exit_code == 0, result.output
    assert (project_root / ".claude" / "agents" / "loner.md").exists()


def test_menu_exit(cli_runner: CliRunner, make_context: ContextFactory) -> None:
    """Test choosing Exit from the main menu."""
    prompter = FakePrompter(selections=[7])

    result = cli_runner.invoke(cli, [], catch_exceptions=False, obj=make_context(prompter))

    assert result.exit_code == 0
    assert "AICraft - AI Agent Manager" in result.output
    assert "Goodbye!" in result.output
    assert prompter.prompts == [("select", "What would you like to do?")]


def test_menu_runs_init(
    cli_runner: CliRunner, make_context: ContextFactory, project_root: Path
) -> None:
    """Test menu actions run the same code as the commands."""
    prompter = FakePrompter(selections=[0])

    result = cli_runner.invoke(cli, [], catch_exceptions=False, obj=make_context(prompter))

    assert result.exit_code == 0, result.output
    assert (project_root / "CLAUDE.md").exists()


def test_menu_install_mcp(
    cli_runner: CliRunner, make_context: ContextFactory, project_root: Path
) -> None:
    """Test the MCP submenu install path."""
    prompter = FakePrompter(selections=[3, 1, 0])

    result = cli_runner.invoke(cli, [], catch_exceptions=False, obj=make_context(prompter))

    assert result.exit_code == 0, result.output
    assert 'MCP server "plain-server" installed successfully!' in result.output
    assert (project_root / ".mcp.json").exists()


def test_menu_error_exits_with_status_one(
    cli_runner: CliRunner, make_context: ContextFactory, assets_root: Path
) -> None:
    """Test errors raised by menu actions are reported cleanly."""
    (assets_root / "agents" / "CLAUDE.md.template").unlink()
    prompter = FakePrompter(selections=[0])

    result = cli_runner.invoke(cli, [], catch_exceptions=False, obj=make_context(prompter))

    assert result.exit_code == 1
    assert "Error: Template file not found" in result.output


def test_project_dir_option(cli_runner: CliRunner, tmp_path: Path, assets_root: Path) -> None:
    """Test the context is built from --project-dir and --assets-dir."""
    project = tmp_path / "elsewhere"
    project.mkdir()

    result = cli_runner.invoke(
        cli,
        ["--project-dir", str(project), "--assets-dir", str(assets_root), "init"],
        catch_exceptions=False,
    )

    assert result.exit_code == 0, result.output
    assert (project / "CLAUDE.md").read_text(encoding="utf-8").startswith("# elsewhere\n")
