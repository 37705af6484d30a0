"""Models for MCP server descriptors and the project's .mcp.json."""

from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


@dataclass(frozen=True)
class McpServerDescriptor:
    """Launch instructions for one MCP server.

    Values in ``args`` and ``env`` may contain ``${NAME}`` placeholders that are
    filled in with user-supplied secrets at install time.
    """

    command: str
    args: list[str] = field(default_factory=list)
    env: dict[str, str] = field(default_factory=dict)
    type: str = "stdio"
    description: str = ""
    category: str | None = None
    tags: list[str] = field(default_factory=list)

    def to_config_entry(self) -> dict[str, Any]:
        """Convert to the entry written under mcpServers in .mcp.json.

        Catalog-only fields (description, category, tags) are not written.
        """
        return {
            "type": self.type,
            "command": self.command,
            "args": list(self.args),
            "env": dict(self.env),
        }

    @staticmethod
    def from_dict(data: dict[str, Any]) -> "McpServerDescriptor":
        return McpServerDescriptor(
            command=data["command"],
            args=[str(arg) for arg in data.get("args") or []],
            env={str(key): str(value) for key, value in (data.get("env") or {}).items()},
            type=data.get("type") or "stdio",
            description=data.get("description") or "",
            category=data.get("category"),
            tags=list(data.get("tags") or []),
        )


class ProjectMcpConfig(BaseModel):
    """The project's .mcp.json.

    Server entries are kept as raw JSON values so that entries aicraft did not
    write survive a read-modify-write cycle unchanged.
    """

    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)

    mcp_servers: dict[str, Any] = Field(default_factory=dict, alias="mcpServers")

    def with_server(self, name: str, entry: dict[str, Any]) -> "ProjectMcpConfig":
        """Return new config with the named server added or replaced."""
        return self.model_copy(update={"mcp_servers": {**self.mcp_servers, name: entry}})

    def without_server(self, name: str) -> "ProjectMcpConfig":
        """Return new config with the named server removed."""
        remaining = {key: value for key, value in self.mcp_servers.items() if key != name}
        return self.model_copy(update={"mcp_servers": remaining})

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)

    @staticmethod
    def empty() -> "ProjectMcpConfig":
        return ProjectMcpConfig(mcp_servers={})
