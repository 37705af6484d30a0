"""aicraft: install Claude Code agents, docs and MCP servers into a project.

Import from submodules:
- version: __version__
- operations.install: install_agent, install_doc, install_mcp_item, remove_mcp_item
- context: AicraftContext, Workspace, create_context
"""

from aicraft.version import __version__ as __version__
