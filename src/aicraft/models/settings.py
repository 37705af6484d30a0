"""Model for the project's .claude/settings.local.json."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ProjectSettings(BaseModel):
    """Local Claude settings that control which .mcp.json servers are enabled.

    Only the two MCP keys are modelled. Any other keys in the file (permissions,
    hooks, ...) are preserved as extra fields.
    """

    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)

    enabled_servers: list[str] = Field(default_factory=list, alias="enabledMcpjsonServers")
    enable_all_project_servers: bool = Field(default=True, alias="enableAllProjectMcpServers")

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON, writing only keys that were read or explicitly set."""
        return self.model_dump(by_alias=True, exclude_unset=True)

    @staticmethod
    def default() -> "ProjectSettings":
        """Settings used when the file is absent or unreadable."""
        return ProjectSettings(enabled_servers=[], enable_all_project_servers=True)
