"""Exceptions raised by aicraft operations.

Every exception carries a short user-facing message and, where one exists, a
hint pointing at the command that fixes the problem. The CLI error boundary
turns them into a red ``Error:`` line and exit status 1.
"""


class AicraftError(Exception):
    """Base class for expected, user-reportable failures."""

    def __init__(self, message: str, hint: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.hint = hint


class ItemNotFoundError(AicraftError):
    """Requested agent, doc or MCP server is not in the catalog (or not installed)."""

    def __init__(self, kind: str, name: str, hint: str | None = None) -> None:
        super().__init__(f'{kind} "{name}" not found', hint)
        self.kind = kind
        self.name = name


class AssetNotFoundError(AicraftError):
    """A catalog entry points at a bundled file that does not exist."""

    def __init__(self, kind: str, filename: str) -> None:
        super().__init__(f"{kind} file not found: {filename}")
        self.kind = kind
        self.filename = filename
