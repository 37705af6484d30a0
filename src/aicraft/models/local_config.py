"""Models for the install record kept in .aicraft/config.json."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_INSTALL_PATH = ".claude/agents/"


class InstalledAgent(BaseModel):
    """An agent that has been copied into the project."""

    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)

    name: str
    installed_at: str = Field(alias="installedAt")
    location: str


class InstalledDoc(BaseModel):
    """A documentation guide that has been copied into the project."""

    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)

    name: str
    installed_at: str = Field(alias="installedAt")
    location: str


class InstalledMcp(BaseModel):
    """An MCP server installed through `aicraft mcp install`."""

    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)

    name: str
    installed_at: str = Field(alias="installedAt")
    package: str | None = None


def _replace_record[R: InstalledAgent | InstalledDoc | InstalledMcp](
    records: list[R], record: R
) -> list[R]:
    # Filter-then-push keeps exactly one record per name, newest last
    return [existing for existing in records if existing.name != record.name] + [record]


class LocalConfig(BaseModel):
    """Everything aicraft has installed into the project.

    Record lists are unique by name. Re-installing an item moves its record to
    the end of the list with a fresh timestamp.
    """

    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)

    install_path: str = Field(default=DEFAULT_INSTALL_PATH, alias="installPath")
    installed_agents: list[InstalledAgent] = Field(default_factory=list, alias="installedAgents")
    installed_docs: list[InstalledDoc] = Field(default_factory=list, alias="installedDocs")
    installed_mcps: list[InstalledMcp] = Field(default_factory=list, alias="installedMcps")

    def with_agent(self, record: InstalledAgent) -> "LocalConfig":
        """Return new config with the agent record added or replaced."""
        agents = _replace_record(self.installed_agents, record)
        return self.model_copy(update={"installed_agents": agents})

    def with_doc(self, record: InstalledDoc) -> "LocalConfig":
        """Return new config with the doc record added or replaced."""
        docs = _replace_record(self.installed_docs, record)
        return self.model_copy(update={"installed_docs": docs})

    def with_mcp(self, record: InstalledMcp) -> "LocalConfig":
        """Return new config with the MCP record added or replaced."""
        mcps = _replace_record(self.installed_mcps, record)
        return self.model_copy(update={"installed_mcps": mcps})

    def without_mcp(self, name: str) -> "LocalConfig":
        """Return new config with the named MCP record dropped."""
        mcps = [record for record in self.installed_mcps if record.name != name]
        return self.model_copy(update={"installed_mcps": mcps})

    def find_mcp(self, name: str) -> InstalledMcp | None:
        for record in self.installed_mcps:
            if record.name == name:
                return record
        return None

    @property
    def agent_names(self) -> list[str]:
        return [record.name for record in self.installed_agents]

    @property
    def doc_names(self) -> list[str]:
        return [record.name for record in self.installed_docs]

    def to_dict(self) -> dict[str, Any]:
        """Convert to the on-disk JSON shape, omitting unset optional fields."""
        return self.model_dump(by_alias=True, exclude_none=True)
