"""Application context with dependency injection.

The AicraftContext dataclass holds every dependency an operation needs: where
the project and the bundled catalog live, how to prompt the user and how to
tell the time. It is created once at the CLI entry point and threaded through
the application via Click's context object.
"""

import os
from dataclasses import dataclass
from pathlib import Path

from aicraft.integrations.clock import Clock, RealClock
from aicraft.integrations.prompter import ClickPrompter, Prompter

BUNDLED_ASSETS_ROOT = Path(__file__).parent / "data"


@dataclass(frozen=True)
class Workspace:
    """Filesystem locations for one invocation.

    Attributes:
        project_root: Project being modified (defaults to the working directory)
        assets_root: Root of the catalog to install from (defaults to the
            catalog bundled with the package)
    """

    project_root: Path
    assets_root: Path

    # Project-side stores

    @property
    def local_config_path(self) -> Path:
        return self.project_root / ".aicraft" / "config.json"

    @property
    def mcp_config_path(self) -> Path:
        return self.project_root / ".mcp.json"

    @property
    def settings_path(self) -> Path:
        return self.project_root / ".claude" / "settings.local.json"

    @property
    def claude_md_path(self) -> Path:
        return self.project_root / "CLAUDE.md"

    @property
    def docs_dir(self) -> Path:
        return self.project_root / "docs"

    @property
    def user_agents_dir(self) -> Path:
        """Where `aicraft create` scaffolds new agents."""
        return self.project_root / ".claude" / "agents"

    def agent_install_dir(self, install_path: str) -> Path:
        return self.project_root / install_path

    # Bundled catalog

    @property
    def agents_catalog_dir(self) -> Path:
        return self.assets_root / "agents"

    @property
    def agent_registry_path(self) -> Path:
        return self.agents_catalog_dir / "registry.json"

    @property
    def mcp_registry_path(self) -> Path:
        return self.agents_catalog_dir / "mcp-registry.json"

    @property
    def claude_template_path(self) -> Path:
        return self.agents_catalog_dir / "CLAUDE.md.template"

    @property
    def docs_catalog_dir(self) -> Path:
        return self.assets_root / "docs"

    @property
    def doc_registry_path(self) -> Path:
        return self.docs_catalog_dir / "registry.json"

    @property
    def mcps_catalog_dir(self) -> Path:
        return self.assets_root / "mcps"

    @property
    def mcp_item_registry_path(self) -> Path:
        return self.mcps_catalog_dir / "registry.json"

    @property
    def sections_dir(self) -> Path:
        return self.assets_root / "sections"


@dataclass(frozen=True)
class AicraftContext:
    """Immutable context holding all dependencies for aicraft operations.

    Attributes:
        workspace: Project and catalog locations
        prompter: Interactive prompts
        clock: Source of install timestamps
        debug: Show full stack traces instead of clean error messages
    """

    workspace: Workspace
    prompter: Prompter
    clock: Clock
    debug: bool

    @staticmethod
    def for_test(
        project_root: Path,
        assets_root: Path | None = None,
        prompter: Prompter | None = None,
        clock: Clock | None = None,
        debug: bool = False,
    ) -> "AicraftContext":
        """Create test context with fakes for any unspecified dependency.

        Args:
            project_root: Project directory, usually a pytest tmp_path
            assets_root: Catalog root. Defaults to the bundled catalog.
            prompter: Optional Prompter. If None, creates a FakePrompter with no
                queued answers.
            clock: Optional Clock. If None, creates a FakeClock.
            debug: Whether to enable debug mode (default False)

        Returns:
            AicraftContext configured with provided values and test defaults
        """
        from aicraft.integrations.clock.fake import FakeClock
        from aicraft.integrations.prompter.fake import FakePrompter

        return AicraftContext(
            workspace=Workspace(
                project_root=project_root,
                assets_root=assets_root if assets_root is not None else BUNDLED_ASSETS_ROOT,
            ),
            prompter=prompter if prompter is not None else FakePrompter(),
            clock=clock if clock is not None else FakeClock(),
            debug=debug,
        )


def create_context(
    *,
    project_root: Path | None = None,
    assets_root: Path | None = None,
    debug: bool = False,
) -> AicraftContext:
    """Create production context with real implementations.

    Called once at CLI entry point.

    Args:
        project_root: Project directory. Defaults to the current directory.
        assets_root: Catalog root. Defaults to the bundled catalog.
        debug: Whether to enable debug mode

    Returns:
        AicraftContext with real prompter and clock
    """
    if project_root is None:
        project_root = Path(os.getcwd())
    if assets_root is None:
        assets_root = BUNDLED_ASSETS_ROOT

    return AicraftContext(
        workspace=Workspace(
            project_root=project_root.resolve(),
            assets_root=assets_root.resolve(),
        ),
        prompter=ClickPrompter(),
        clock=RealClock(),
        debug=debug,
    )
