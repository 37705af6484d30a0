"""Catalog loading for agents, docs and MCP servers.

Each catalog is read from a JSON manifest when one exists and otherwise from
the front matter of the markdown files next to it. Loading never aborts a
command: a catalog that cannot be read is logged and treated as empty.
"""

import json
import logging
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Any

import frontmatter
import yaml

from aicraft.context import Workspace
from aicraft.errors import AssetNotFoundError
from aicraft.models.catalog import Agent, Doc, McpItem
from aicraft.models.mcp import McpServerDescriptor

logger = logging.getLogger(__name__)

DEFAULT_DOC_DESCRIPTION = "Documentation guide"

# Errors that mean "this catalog is unusable" rather than a bug in aicraft
_CATALOG_ERRORS = (OSError, UnicodeDecodeError, ValueError, KeyError, TypeError, yaml.YAMLError)


def _load_soft[T](label: str, loader: Callable[[], T], fallback: T) -> T:
    try:
        return loader()
    except _CATALOG_ERRORS as e:
        logger.warning("Could not load %s catalog: %s", label, e)
        return fallback


def _read_manifest(path: Path) -> dict[str, Any]:
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"{path.name} must contain a JSON object")
    return data


def _scan_front_matter(directory: Path) -> list[tuple[Path, dict[str, Any]]]:
    """Front matter of every markdown file in ``directory``, sorted by filename."""
    if not directory.is_dir():
        return []

    results: list[tuple[Path, dict[str, Any]]] = []
    for path in sorted(directory.glob("*.md")):
        post = frontmatter.load(str(path))
        results.append((path, dict(post.metadata)))
    return results


def load_agents(workspace: Workspace) -> list[Agent]:
    """Load the agent catalog.

    Falls back to agent markdown files that declare a ``name`` in their
    front matter when agents/registry.json is absent.
    """

    def load() -> list[Agent]:
        if workspace.agent_registry_path.exists():
            manifest = _read_manifest(workspace.agent_registry_path)
            return [Agent.from_dict(entry) for entry in manifest.get("agents", [])]

        return [
            Agent.from_dict(metadata, filename=path.name)
            for path, metadata in _scan_front_matter(workspace.agents_catalog_dir)
            if metadata.get("name")
        ]

    return _load_soft("agent", load, [])


def load_docs(workspace: Workspace) -> list[Doc]:
    """Load the documentation catalog.

    Without docs/registry.json every markdown file in docs/ is a doc, named
    after its file unless the front matter says otherwise.
    """

    def load() -> list[Doc]:
        if workspace.doc_registry_path.exists():
            manifest = _read_manifest(workspace.doc_registry_path)
            return [Doc.from_dict(entry) for entry in manifest.get("docs", [])]

        docs: list[Doc] = []
        for path, metadata in _scan_front_matter(workspace.docs_catalog_dir):
            docs.append(
                Doc.from_dict(
                    {
                        **metadata,
                        "name": metadata.get("name") or path.stem,
                        "description": metadata.get("description") or DEFAULT_DOC_DESCRIPTION,
                    },
                    filename=path.name,
                )
            )
        return docs

    return _load_soft("doc", load, [])


def load_mcp_items(workspace: Workspace) -> list[McpItem]:
    """Load the standalone MCP catalog used by `aicraft mcp`.

    Falls back to front matter of markdown files in mcps/ when
    mcps/registry.json is absent.
    """

    def load() -> list[McpItem]:
        if workspace.mcp_item_registry_path.exists():
            manifest = _read_manifest(workspace.mcp_item_registry_path)
            return [McpItem.from_dict(entry) for entry in manifest.get("mcps", [])]

        return [
            McpItem.from_dict(metadata)
            for _path, metadata in _scan_front_matter(workspace.mcps_catalog_dir)
            if metadata.get("name")
        ]

    return _load_soft("MCP", load, [])


def load_mcp_servers(workspace: Workspace) -> dict[str, McpServerDescriptor]:
    """Load MCP server descriptors keyed by server name.

    Agents declare their MCP dependencies by these names. Without
    agents/mcp-registry.json the descriptors come from the server templates
    embedded in the MCP item catalog.
    """

    def load() -> dict[str, McpServerDescriptor]:
        if workspace.mcp_registry_path.exists():
            manifest = _read_manifest(workspace.mcp_registry_path)
            servers = manifest.get("mcpServers", {})
            return {
                name: McpServerDescriptor.from_dict(entry) for name, entry in servers.items()
            }

        descriptors: dict[str, McpServerDescriptor] = {}
        for item in load_mcp_items(workspace):
            if item.installation is None:
                continue
            for name, entry in item.installation.servers.items():
                descriptors[name] = McpServerDescriptor.from_dict(entry)
        return descriptors

    return _load_soft("MCP server", load, {})


def find_agent(agents: Sequence[Agent], name: str) -> Agent | None:
    for agent in agents:
        if agent.name == name:
            return agent
    return None


def find_doc(docs: Sequence[Doc], name: str) -> Doc | None:
    for doc in docs:
        if doc.name == name:
            return doc
    return None


def find_mcp_item(items: Sequence[McpItem], name: str) -> McpItem | None:
    for item in items:
        if item.name == name:
            return item
    return None


def agent_source_path(workspace: Workspace, agent: Agent) -> Path:
    return workspace.agents_catalog_dir / agent.filename


def doc_source_path(workspace: Workspace, doc: Doc) -> Path:
    return workspace.docs_catalog_dir / doc.filename


def setup_guide_source_path(workspace: Workspace, item: McpItem) -> Path | None:
    if item.setup_guide is None:
        return None
    return workspace.mcps_catalog_dir / item.setup_guide


def read_asset(path: Path, kind: str) -> str:
    """Read a bundled file that a command cannot do without.

    Raises:
        AssetNotFoundError: If the file does not exist
    """
    if not path.is_file():
        raise AssetNotFoundError(kind, path.name)
    return path.read_text(encoding="utf-8")


def load_claude_template(workspace: Workspace) -> str:
    """Read the CLAUDE.md template.

    Raises:
        AssetNotFoundError: If the catalog has no template
    """
    return read_asset(workspace.claude_template_path, "Template")
