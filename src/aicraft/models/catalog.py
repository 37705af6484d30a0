"""Catalog entry models.

Catalog entries describe what aicraft can install. They are read from the
bundled asset tree and never written back, so they are plain frozen
dataclasses.
"""

from dataclasses import dataclass, field
from typing import Any, Literal

ItemKind = Literal["agent", "doc", "mcp"]


def _as_list(value: Any) -> list[str]:
    """Normalize a tag-like value into a list of strings.

    Front matter authors write tags either as a YAML list or as a
    comma-separated string.
    """
    if value is None:
        return []
    if isinstance(value, str):
        return [part.strip() for part in value.split(",") if part.strip()]
    return [str(part) for part in value]


@dataclass(frozen=True)
class Agent:
    """An installable agent definition."""

    name: str
    filename: str
    description: str = ""
    model: str = "sonnet"
    color: str = "blue"
    tags: list[str] = field(default_factory=list)
    mcps: list[str] = field(default_factory=list)

    @staticmethod
    def from_dict(data: dict[str, Any], *, filename: str | None = None) -> "Agent":
        name = data["name"]
        return Agent(
            name=name,
            filename=data.get("filename") or filename or f"{name}.md",
            description=data.get("description") or "",
            model=data.get("model") or "sonnet",
            color=data.get("color") or "blue",
            tags=_as_list(data.get("tags")),
            mcps=_as_list(data.get("mcps")),
        )


@dataclass(frozen=True)
class Doc:
    """An installable documentation guide."""

    name: str
    filename: str
    description: str = ""
    color: str = "cyan"
    tags: list[str] = field(default_factory=list)

    @staticmethod
    def from_dict(data: dict[str, Any], *, filename: str | None = None) -> "Doc":
        name = data["name"]
        return Doc(
            name=name,
            filename=data.get("filename") or filename or f"{name}.md",
            description=data.get("description") or "",
            color=data.get("color") or "cyan",
            tags=_as_list(data.get("tags")),
        )


@dataclass(frozen=True)
class McpInstallation:
    """How an MCP item is launched, plus the .mcp.json fragment it contributes."""

    command: str | None = None
    args: list[str] = field(default_factory=list)
    config: dict[str, Any] = field(default_factory=dict)

    @property
    def servers(self) -> dict[str, dict[str, Any]]:
        """Server entries under config.mcpServers, keyed by server name."""
        servers = self.config.get("mcpServers")
        if not isinstance(servers, dict):
            return {}
        return servers

    @staticmethod
    def from_dict(data: dict[str, Any]) -> "McpInstallation":
        return McpInstallation(
            command=data.get("command"),
            args=[str(arg) for arg in data.get("args") or []],
            config=dict(data.get("config") or {}),
        )


@dataclass(frozen=True)
class McpItem:
    """A standalone MCP server offered by the `aicraft mcp` commands."""

    name: str
    description: str = ""
    package: str | None = None
    category: str | None = None
    technologies: list[str] = field(default_factory=list)
    setup_guide: str | None = None
    auto_install: bool = False
    required_by: list[str] = field(default_factory=list)
    color: str = "magenta"
    tags: list[str] = field(default_factory=list)
    homepage: str | None = None
    installation: McpInstallation | None = None

    @staticmethod
    def from_dict(data: dict[str, Any]) -> "McpItem":
        installation = data.get("installation")
        return McpItem(
            name=data["name"],
            description=data.get("description") or "",
            package=data.get("package"),
            category=data.get("category"),
            technologies=_as_list(data.get("technologies")),
            setup_guide=data.get("setup_guide"),
            auto_install=bool(data.get("auto_install", False)),
            required_by=_as_list(data.get("required_by")),
            color=data.get("color") or "magenta",
            tags=_as_list(data.get("tags")),
            homepage=data.get("homepage"),
            installation=McpInstallation.from_dict(installation) if installation else None,
        )
