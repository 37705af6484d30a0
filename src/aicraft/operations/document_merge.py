"""Targeted, idempotent edits to the project's CLAUDE.md.

There are two ways CLAUDE.md changes:

- Regeneration renders the bundled template and overwrites the whole file.
  `init` and agent installs use it.
- Structural edits parse the existing file into a MarkdownDocument, add a
  line or a section, and write it back only if something changed. Doc
  installs and agent-specific sections use them.

Structural edits never create CLAUDE.md. When it is missing they report
"missing" and leave the project untouched.
"""

import logging
from collections.abc import Callable, Mapping, Sequence
from pathlib import Path

from aicraft.context import Workspace
from aicraft.io.catalog import find_agent, read_asset
from aicraft.io.project import ProjectInfo
from aicraft.models.catalog import Agent
from aicraft.models.document import SECTION_LEVEL, MarkdownDocument, Section
from aicraft.models.results import DocumentUpdate

logger = logging.getLogger(__name__)

QUICK_REFERENCES_TITLE = "Quick References"
QUICK_REFERENCES_INTRO = "For specific deployment tasks, check these documentation files:"
INSTALLED_AGENTS_TITLE = "Installed Agents"

NO_SUB_AGENTS = "No agents installed yet. Run `aicraft install [agent-name]` to add agents."
NO_INSTALLED_AGENTS = "No agents installed yet."
NO_INSTALLED_DOCS = "No documentation installed yet."

# Extra CLAUDE.md sections contributed by specific agents, relative to the
# catalog's sections/ directory
AGENT_SECTIONS: dict[str, str] = {
    "design-review": "visual-development.md",
}


def ensure_section(doc: MarkdownDocument, title: str, default_body: str) -> MarkdownDocument:
    """Make sure a level-2 section called ``title`` exists.

    A new section goes before the first existing level-2 heading, or at the
    end of the document when there is none.
    """
    if doc.find_section(title) is not None:
        return doc

    section = Section.create(title, default_body)
    index = doc.first_index_at_level(SECTION_LEVEL)
    return doc.insert_section(len(doc.sections) if index is None else index, section)


def append_under_section(
    doc: MarkdownDocument,
    title: str,
    line: str,
    *,
    marker: str,
    default_body: str,
) -> MarkdownDocument:
    """Add ``line`` to the section ``title`` unless ``marker`` is already there.

    The section is created with ``default_body`` first if needed.
    """
    doc = ensure_section(doc, title, default_body)
    for index, section in enumerate(doc.sections):
        if section.title != title:
            continue
        if section.contains(marker):
            return doc
        return doc.replace_section(index, section.append_line(line))
    return doc


def insert_section_after(doc: MarkdownDocument, anchor_title: str, block: str) -> MarkdownDocument:
    """Insert the sections in ``block`` right after the ``anchor_title`` section.

    Nothing happens if the first heading of ``block`` is already present
    anywhere in the document. Without the anchor the block goes at the end.
    """
    new_sections = MarkdownDocument.parse(block).sections
    if not new_sections or doc.has_heading(new_sections[0].title):
        return doc

    anchor = doc.find_index(anchor_title)
    position = len(doc.sections) if anchor is None else anchor + 1
    for offset, section in enumerate(new_sections):
        doc = doc.insert_section(position + offset, section)
    return doc


def regenerate(template: str, variables: Mapping[str, str]) -> str:
    """Fill every ``{{KEY}}`` in ``template`` with ``variables[KEY]``."""
    content = template
    for key, value in variables.items():
        content = content.replace("{{" + key + "}}", value)
    return content


def render_sub_agent(name: str, agent: Agent | None) -> str:
    description = agent.description if agent is not None and agent.description else name
    mcps = ", ".join(agent.mcps) if agent is not None and agent.mcps else "None"
    return "\n".join(
        [
            f"### {name}",
            f"- **Usage**: {description}",
            f"- **MCPs**: {mcps}",
            "- **Context**: Always pass session context file `.claude/tasks/context_session_x.md`",
            "- **Follow-up**: Read agent documentation in `.claude/doc/` before implementation",
        ]
    )


def build_template_variables(
    project: ProjectInfo,
    agent_names: Sequence[str],
    doc_names: Sequence[str],
    catalog: Sequence[Agent],
) -> dict[str, str]:
    """Compute the values for every placeholder in CLAUDE.md.template.

    Agents no longer in the catalog still get a block, without MCPs.
    """
    sub_agents = "\n\n".join(
        render_sub_agent(name, find_agent(catalog, name)) for name in agent_names
    )
    installed_agents = "\n".join(f"- **{name}**: Installed" for name in agent_names)
    installed_docs = "\n".join(
        f"- **{name}**: Available in `docs/{name}.md`" for name in doc_names
    )
    return {
        "PROJECT_NAME": project.name,
        "PROJECT_DESCRIPTION": project.description,
        "SUB_AGENTS": sub_agents or NO_SUB_AGENTS,
        "INSTALLED_AGENTS": installed_agents or NO_INSTALLED_AGENTS,
        "INSTALLED_DOCS": installed_docs or NO_INSTALLED_DOCS,
    }


def write_claude_md(path: Path, content: str) -> DocumentUpdate:
    """Overwrite CLAUDE.md with freshly generated content."""
    if path.exists() and path.read_text(encoding="utf-8") == content:
        return DocumentUpdate(path, "unchanged")
    path.write_text(content, encoding="utf-8")
    return DocumentUpdate(path, "updated")


def update_claude_md(
    path: Path, transform: Callable[[MarkdownDocument], MarkdownDocument]
) -> DocumentUpdate:
    """Apply a structural edit to an existing CLAUDE.md.

    Args:
        path: Path to CLAUDE.md
        transform: Edit to apply to the parsed document

    Returns:
        DocumentUpdate with status "missing" when there is no CLAUDE.md,
        "unchanged" when the edit was a no-op, otherwise "updated"
    """
    if not path.exists():
        logger.debug("%s not found, skipping update", path)
        return DocumentUpdate(path, "missing")

    original = path.read_text(encoding="utf-8")
    updated = transform(MarkdownDocument.parse(original)).render()
    if updated == original:
        return DocumentUpdate(path, "unchanged")

    path.write_text(updated, encoding="utf-8")
    return DocumentUpdate(path, "updated")


def doc_reference_line(name: str, description: str) -> str:
    return f"- **{name}**: Available in `docs/{name}.md` - {description}"


def append_doc_reference(path: Path, name: str, description: str) -> DocumentUpdate:
    """List an installed doc under Quick References, once."""
    return update_claude_md(
        path,
        lambda doc: append_under_section(
            doc,
            QUICK_REFERENCES_TITLE,
            doc_reference_line(name, description),
            marker=f"**{name}**:",
            default_body=f"\n{QUICK_REFERENCES_INTRO}\n\n",
        ),
    )


def load_agent_sections(workspace: Workspace, agent_names: Sequence[str]) -> list[str]:
    """Read the section blocks contributed by the given agents, in install order.

    Raises:
        AssetNotFoundError: If a section file is missing from the catalog
    """
    return [
        read_asset(workspace.sections_dir / AGENT_SECTIONS[name], "Section")
        for name in agent_names
        if name in AGENT_SECTIONS
    ]


def with_agent_sections(doc: MarkdownDocument, blocks: Sequence[str]) -> MarkdownDocument:
    for block in blocks:
        doc = insert_section_after(doc, INSTALLED_AGENTS_TITLE, block)
    return doc
