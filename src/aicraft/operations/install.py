"""Install and remove catalog items.

Every install follows the same sequence: pick the item, ask before
overwriting an existing install, copy the bundled file, set up MCP servers,
record the install in .aicraft/config.json and finally update CLAUDE.md.
Declining the overwrite prompt leaves the project untouched.

The install record is reloaded right before it is saved so that anything
written while the user was answering prompts is not lost.
"""

import logging
import shutil
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from aicraft.context import AicraftContext, Workspace
from aicraft.errors import AicraftError, AssetNotFoundError, ItemNotFoundError
from aicraft.io.catalog import (
    agent_source_path,
    doc_source_path,
    find_agent,
    find_doc,
    find_mcp_item,
    load_agents,
    load_claude_template,
    load_docs,
    load_mcp_items,
    load_mcp_servers,
    setup_guide_source_path,
)
from aicraft.io.project import read_project_info
from aicraft.io.state import load_local_config, save_local_config
from aicraft.models.catalog import Agent, Doc, McpItem
from aicraft.models.document import MarkdownDocument
from aicraft.models.local_config import InstalledAgent, InstalledDoc, InstalledMcp, LocalConfig
from aicraft.models.mcp import McpServerDescriptor
from aicraft.models.results import DocumentUpdate, InstallResult, RemoveResult
from aicraft.operations.document_merge import (
    append_doc_reference,
    build_template_variables,
    load_agent_sections,
    regenerate,
    with_agent_sections,
    write_claude_md,
)
from aicraft.operations.mcp_sync import install_mcp_server, remove_mcp_server
from aicraft.operations.settings_enable import disable_mcp_server, enable_mcp_servers

logger = logging.getLogger(__name__)

LIST_HINT = 'Run "aicraft list" to see available agents and docs.'
MCP_LIST_HINT = 'Run "aicraft mcp list" to see available MCP servers.'
MCP_STATUS_HINT = 'Run "aicraft mcp status" to see installed MCP servers.'


@dataclass(frozen=True)
class InitResult:
    """Outcome of `aicraft init`."""

    document: DocumentUpdate
    copied_docs: list[Path]


def _record_location(workspace: Workspace, path: Path) -> str:
    """Path stored in install records: project-relative when possible."""
    if path.is_relative_to(workspace.project_root):
        return path.relative_to(workspace.project_root).as_posix()
    return str(path)


def resolve_record_location(workspace: Workspace, location: str) -> Path:
    """Inverse of the stored location; absolute paths are returned unchanged."""
    return workspace.project_root / location


def _copy_asset(source: Path, destination: Path, kind: str, filename: str) -> None:
    if not source.is_file():
        raise AssetNotFoundError(kind, filename)
    destination.parent.mkdir(parents=True, exist_ok=True)
    shutil.copyfile(source, destination)


def _confirm_reinstall(ctx: AicraftContext, message: str) -> bool:
    return ctx.prompter.confirm(message, default=False)


# Selection


def select_install_target(ctx: AicraftContext, name: str | None) -> Agent | Doc:
    """Find the agent or doc to install.

    With a name, agents are matched before docs. Without one, the user
    picks from both catalogs.

    Raises:
        ItemNotFoundError: If no agent or doc has that name
        AicraftError: If both catalogs are empty
    """
    agents = load_agents(ctx.workspace)
    docs = load_docs(ctx.workspace)
    if not agents and not docs:
        raise AicraftError("No agents or docs available")

    if name is not None:
        agent = find_agent(agents, name)
        if agent is not None:
            return agent
        doc = find_doc(docs, name)
        if doc is not None:
            return doc
        raise ItemNotFoundError("Agent or documentation", name, hint=LIST_HINT)

    choices: list[tuple[str, Agent | Doc]] = [
        (f"[agent] {agent.name} - {agent.description}", agent) for agent in agents
    ]
    choices.extend((f"[doc] {doc.name} - {doc.description}", doc) for doc in docs)
    return ctx.prompter.select("Select an agent or documentation to install:", choices)


def select_mcp_item(ctx: AicraftContext, name: str | None) -> McpItem:
    """Find the MCP server to install, prompting when no name is given.

    Raises:
        ItemNotFoundError: If no MCP item has that name
        AicraftError: If the MCP catalog is empty
    """
    items = load_mcp_items(ctx.workspace)
    if not items:
        raise AicraftError("No MCP servers available")

    if name is not None:
        item = find_mcp_item(items, name)
        if item is None:
            raise ItemNotFoundError("MCP server", name, hint=MCP_LIST_HINT)
        return item

    choices = [(f"{item.name} - {item.description}", item) for item in items]
    return ctx.prompter.select("Select an MCP server to install:", choices)


def select_installed_mcp(ctx: AicraftContext, name: str | None) -> str:
    """Pick an installed MCP server by name, prompting when none is given.

    Raises:
        AicraftError: If the server is not installed, or nothing is
    """
    config = load_local_config(ctx.workspace.local_config_path)
    if not config.installed_mcps:
        raise AicraftError("No MCP servers installed")

    if name is not None:
        if config.find_mcp(name) is None:
            raise AicraftError(f'MCP server "{name}" is not installed', hint=MCP_STATUS_HINT)
        return name

    choices = [(record.name, record.name) for record in config.installed_mcps]
    return ctx.prompter.select("Select an MCP server to remove:", choices)


# CLAUDE.md


def regenerate_claude_md(ctx: AicraftContext, config: LocalConfig) -> DocumentUpdate:
    """Render CLAUDE.md from the template for everything in ``config``.

    Sections contributed by installed agents are applied to the rendered
    text before it is written, since regeneration would otherwise drop them.

    Raises:
        AssetNotFoundError: If the template or a section file is missing
    """
    workspace = ctx.workspace
    variables = build_template_variables(
        read_project_info(workspace.project_root),
        config.agent_names,
        config.doc_names,
        load_agents(workspace),
    )
    rendered = regenerate(load_claude_template(workspace), variables)
    blocks = load_agent_sections(workspace, config.agent_names)
    content = with_agent_sections(MarkdownDocument.parse(rendered), blocks).render()
    return write_claude_md(workspace.claude_md_path, content)


# MCP servers


def install_agent_mcps(ctx: AicraftContext, names: Sequence[str]) -> tuple[list[str], list[str]]:
    """Install an agent's MCP dependencies into .mcp.json and enable them.

    Dependencies missing from the MCP catalog are skipped with a warning.

    Returns:
        Tuple of (installed names, skipped names)
    """
    if not names:
        return [], []

    workspace = ctx.workspace
    servers = load_mcp_servers(workspace)
    installed: list[str] = []
    skipped: list[str] = []
    for name in names:
        descriptor = servers.get(name)
        if descriptor is None:
            logger.warning("MCP server %s is not in the catalog, skipping", name)
            skipped.append(name)
            continue
        install_mcp_server(workspace.mcp_config_path, ctx.prompter, name, descriptor)
        installed.append(name)

    if installed:
        enable_mcp_servers(workspace.settings_path, installed)
    return installed, skipped


def resolve_mcp_descriptor(workspace: Workspace, item: McpItem) -> McpServerDescriptor:
    """Find launch instructions for an MCP item.

    The MCP server catalog wins; the item's own embedded server template is
    the fallback.

    Raises:
        AicraftError: If neither source describes the server
    """
    descriptor = load_mcp_servers(workspace).get(item.name)
    if descriptor is not None:
        return descriptor

    if item.installation is not None and item.name in item.installation.servers:
        return McpServerDescriptor.from_dict(item.installation.servers[item.name])

    raise AicraftError(f"MCP server configuration not found for {item.name}")


def copy_setup_guide(workspace: Workspace, item: McpItem) -> Path | None:
    """Copy an MCP item's setup guide to docs/mcp-<name>.md, if it has one."""
    source = setup_guide_source_path(workspace, item)
    if source is None:
        return None
    if not source.is_file():
        logger.warning("Setup guide for %s not found: %s", item.name, item.setup_guide)
        return None

    destination = workspace.docs_dir / f"mcp-{item.name}.md"
    destination.parent.mkdir(parents=True, exist_ok=True)
    shutil.copyfile(source, destination)
    return destination


# Install


def install_agent(ctx: AicraftContext, agent: Agent) -> InstallResult:
    """Install an agent and its MCP dependencies, then regenerate CLAUDE.md.

    Raises:
        AssetNotFoundError: If the agent's markdown file is missing
    """
    workspace = ctx.workspace
    config = load_local_config(workspace.local_config_path)
    if agent.name in config.agent_names and not _confirm_reinstall(
        ctx, f'Agent "{agent.name}" is already installed. Overwrite?'
    ):
        return InstallResult.declined("agent", agent.name)

    destination = workspace.agent_install_dir(config.install_path) / f"{agent.name}.md"
    _copy_asset(agent_source_path(workspace, agent), destination, "Agent", agent.filename)

    installed_mcps, skipped_mcps = install_agent_mcps(ctx, agent.mcps)

    config = load_local_config(workspace.local_config_path).with_agent(
        InstalledAgent(
            name=agent.name,
            installed_at=ctx.clock.timestamp(),
            location=_record_location(workspace, destination),
        )
    )
    save_local_config(workspace.local_config_path, config)

    document = regenerate_claude_md(ctx, config)
    logger.debug("Installed agent %s to %s", agent.name, destination)
    return InstallResult(
        kind="agent",
        name=agent.name,
        status="installed",
        location=destination,
        mcp_servers=installed_mcps,
        skipped_mcp_servers=skipped_mcps,
        document=document,
    )


def install_doc(ctx: AicraftContext, doc: Doc) -> InstallResult:
    """Copy a doc into docs/ and reference it from CLAUDE.md.

    Raises:
        AssetNotFoundError: If the doc's markdown file is missing
    """
    workspace = ctx.workspace
    config = load_local_config(workspace.local_config_path)
    if doc.name in config.doc_names and not _confirm_reinstall(
        ctx, f'Documentation "{doc.name}" is already installed. Overwrite?'
    ):
        return InstallResult.declined("doc", doc.name)

    destination = workspace.docs_dir / f"{doc.name}.md"
    _copy_asset(doc_source_path(workspace, doc), destination, "Documentation", doc.filename)

    config = load_local_config(workspace.local_config_path).with_doc(
        InstalledDoc(
            name=doc.name,
            installed_at=ctx.clock.timestamp(),
            location=_record_location(workspace, destination),
        )
    )
    save_local_config(workspace.local_config_path, config)

    document = append_doc_reference(workspace.claude_md_path, doc.name, doc.description)
    return InstallResult(
        kind="doc",
        name=doc.name,
        status="installed",
        location=destination,
        document=document,
    )


def install_by_name(ctx: AicraftContext, name: str | None) -> InstallResult:
    """Install the agent or doc called ``name``, or one the user picks."""
    target = select_install_target(ctx, name)
    if isinstance(target, Agent):
        return install_agent(ctx, target)
    return install_doc(ctx, target)


def install_mcp_item(ctx: AicraftContext, item: McpItem) -> InstallResult:
    """Install a standalone MCP server and record it.

    Raises:
        AicraftError: If no launch instructions exist for the server
    """
    workspace = ctx.workspace
    config = load_local_config(workspace.local_config_path)
    if config.find_mcp(item.name) is not None and not _confirm_reinstall(
        ctx, f'MCP server "{item.name}" is already installed. Reinstall?'
    ):
        return InstallResult.declined("mcp", item.name)

    descriptor = resolve_mcp_descriptor(workspace, item)
    install_mcp_server(workspace.mcp_config_path, ctx.prompter, item.name, descriptor)
    enable_mcp_servers(workspace.settings_path, [item.name])

    config = load_local_config(workspace.local_config_path).with_mcp(
        InstalledMcp(name=item.name, installed_at=ctx.clock.timestamp(), package=item.package)
    )
    save_local_config(workspace.local_config_path, config)

    return InstallResult(
        kind="mcp",
        name=item.name,
        status="installed",
        location=workspace.mcp_config_path,
        mcp_servers=[item.name],
        setup_guide=copy_setup_guide(workspace, item),
    )


def remove_mcp_item(ctx: AicraftContext, name: str) -> RemoveResult:
    """Undo an MCP install after confirmation.

    Each store that no longer mentions the server counts as already done.
    """
    if not ctx.prompter.confirm(f'Are you sure you want to remove MCP server "{name}"?'):
        return RemoveResult(name=name, status="declined")

    workspace = ctx.workspace
    removed_from_mcp_config = remove_mcp_server(workspace.mcp_config_path, name)
    removed_from_settings = disable_mcp_server(workspace.settings_path, name)

    config = load_local_config(workspace.local_config_path)
    removed_from_local_config = config.find_mcp(name) is not None
    if removed_from_local_config:
        save_local_config(workspace.local_config_path, config.without_mcp(name))

    return RemoveResult(
        name=name,
        status="removed",
        removed_from_mcp_config=removed_from_mcp_config,
        removed_from_settings=removed_from_settings,
        removed_from_local_config=removed_from_local_config,
    )


# Init


def copy_bundled_docs(workspace: Workspace) -> list[Path]:
    """Copy every bundled markdown doc into the project's docs/ directory."""
    source_dir = workspace.docs_catalog_dir
    if not source_dir.is_dir():
        return []

    copied: list[Path] = []
    for source in sorted(source_dir.glob("*.md")):
        destination = workspace.docs_dir / source.name
        destination.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(source, destination)
        copied.append(destination)
    return copied


def init_project(ctx: AicraftContext) -> InitResult:
    """Generate CLAUDE.md for what is installed and copy the bundled docs.

    Raises:
        AssetNotFoundError: If the template is missing
    """
    config = load_local_config(ctx.workspace.local_config_path)
    document = regenerate_claude_md(ctx, config)
    return InitResult(document=document, copied_docs=copy_bundled_docs(ctx.workspace))
