"""Tests for the enabled-server list in settings.local.json."""

import json
from pathlib import Path

from aicraft.io.settings_json import load_settings
from aicraft.models.settings import ProjectSettings
from aicraft.operations.settings_enable import (
    disable_mcp_server,
    disable_server,
    enable_mcp_servers,
    enable_servers,
)


def test_enable_servers_deduplicates_and_keeps_order() -> None:
    """Test enabling X, X then Y yields [X, Y]."""
    settings = ProjectSettings.default()
    for name in ["X", "X", "Y"]:
        settings = enable_servers(settings, [name])

    assert settings.enabled_servers == ["X", "Y"]
    assert settings.enable_all_project_servers is True


def test_enable_servers_turns_on_enable_all() -> None:
    """Test the enable-all flag is forced on."""
    settings = ProjectSettings(enabled_servers=["A"], enable_all_project_servers=False)

    updated = enable_servers(settings, ["A", "B"])

    assert updated.enabled_servers == ["A", "B"]
    assert updated.enable_all_project_servers is True


def test_disable_server() -> None:
    """Test removing a name from the list."""
    settings = ProjectSettings(enabled_servers=["A", "B"])

    assert disable_server(settings, "A").enabled_servers == ["B"]


def test_enable_mcp_servers_creates_file(tmp_path: Path) -> None:
    """Test the settings file and its directory are created."""
    path = tmp_path / ".claude" / "settings.local.json"

    enable_mcp_servers(path, ["playwright"])

    assert json.loads(path.read_text(encoding="utf-8")) == {
        "enabledMcpjsonServers": ["playwright"],
        "enableAllProjectMcpServers": True,
    }


def test_enable_mcp_servers_preserves_other_keys(tmp_path: Path) -> None:
    """Test unrelated settings survive."""
    path = tmp_path / "settings.local.json"
    path.write_text(
        json.dumps({"permissions": {"allow": ["Bash(ls)"]}, "enabledMcpjsonServers": ["a"]}),
        encoding="utf-8",
    )

    enable_mcp_servers(path, ["b", "a"])

    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["permissions"] == {"allow": ["Bash(ls)"]}
    assert data["enabledMcpjsonServers"] == ["a", "b"]


def test_enable_mcp_servers_replaces_corrupt_file(tmp_path: Path) -> None:
    """Test a malformed settings file is treated as empty."""
    path = tmp_path / "settings.local.json"
    path.write_text("[1, 2", encoding="utf-8")

    enable_mcp_servers(path, ["a"])

    assert json.loads(path.read_text(encoding="utf-8"))["enabledMcpjsonServers"] == ["a"]


def test_disable_mcp_server_without_file_does_not_create_one(tmp_path: Path) -> None:
    """Test there is nothing to do when the file is absent."""
    path = tmp_path / "settings.local.json"

    assert not disable_mcp_server(path, "a")
    assert not path.exists()


def test_disable_mcp_server_rewrites_file(tmp_path: Path) -> None:
    """Test a listed server is removed and the file rewritten."""
    path = tmp_path / "settings.local.json"
    path.write_text(json.dumps({"enabledMcpjsonServers": ["a", "b"]}), encoding="utf-8")

    assert disable_mcp_server(path, "a")
    assert json.loads(path.read_text(encoding="utf-8"))["enabledMcpjsonServers"] == ["b"]
    assert not disable_mcp_server(path, "a")


def test_enable_then_load_round_trip(tmp_path: Path) -> None:
    """Test the written file reads back as the returned settings."""
    path = tmp_path / "settings.local.json"

    written = enable_mcp_servers(path, ["a", "b"])

    assert load_settings(path) == written


def test_enable_servers_single_call_with_duplicates() -> None:
    settings = enable_servers(ProjectSettings.default(), ["X", "X", "Y"])

    assert settings.enabled_servers == ["X", "Y"]


def test_disable_mcp_server_does_not_add_enable_all_flag(tmp_path: Path) -> None:
    """Test only the enabled list changes when the file never had the flag."""
    path = tmp_path / "settings.local.json"
    permissions = {"allow": ["Bash(ls)"]}
    path.write_text(
        json.dumps({"permissions": permissions, "enabledMcpjsonServers": ["Z", "Y"]}),
        encoding="utf-8",
    )

    assert disable_mcp_server(path, "Z")
    assert json.loads(path.read_text(encoding="utf-8")) == {
        "permissions": permissions,
        "enabledMcpjsonServers": ["Y"],
    }
