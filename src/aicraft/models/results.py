"""Result types returned by aicraft operations.

Operations report what they did instead of printing, so commands can decide
what to tell the user and which exit status to use.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal

from aicraft.models.catalog import ItemKind

LoadStatus = Literal["loaded", "missing", "corrupt"]
UpdateStatus = Literal["updated", "unchanged", "missing"]
InstallStatus = Literal["installed", "declined"]
RemoveStatus = Literal["removed", "declined"]


@dataclass(frozen=True)
class LoadResult[T]:
    """A value read from a JSON store, plus how it was obtained."""

    value: T
    status: LoadStatus

    @property
    def used_default(self) -> bool:
        return self.status != "loaded"


@dataclass(frozen=True)
class DocumentUpdate:
    """Outcome of one CLAUDE.md write."""

    path: Path
    status: UpdateStatus

    @property
    def changed(self) -> bool:
        return self.status == "updated"


@dataclass(frozen=True)
class InstallResult:
    """Outcome of installing one catalog item."""

    kind: ItemKind
    name: str
    status: InstallStatus
    location: Path | None = None
    mcp_servers: list[str] = field(default_factory=list)
    skipped_mcp_servers: list[str] = field(default_factory=list)
    setup_guide: Path | None = None
    document: DocumentUpdate | None = None

    @property
    def installed(self) -> bool:
        return self.status == "installed"

    @staticmethod
    def declined(kind: ItemKind, name: str) -> "InstallResult":
        return InstallResult(kind=kind, name=name, status="declined")


@dataclass(frozen=True)
class RemoveResult:
    """Outcome of removing an installed MCP server.

    The three flags say which stores actually held the server, so a caller
    can tell a real removal from one where everything was already gone.
    """

    name: str
    status: RemoveStatus
    removed_from_mcp_config: bool = False
    removed_from_settings: bool = False
    removed_from_local_config: bool = False
