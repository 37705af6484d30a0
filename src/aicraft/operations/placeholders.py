"""Secret placeholder handling for MCP server descriptors.

Descriptors may reference values the user must supply, written as
``${NAME}`` inside env values or args. A token without its closing brace is
plain text.
"""

import re
from collections.abc import Mapping
from dataclasses import replace

from aicraft.models.mcp import McpServerDescriptor

PLACEHOLDER_PATTERN = re.compile(r"\$\{([^}]+)\}")


def find_placeholders(descriptor: McpServerDescriptor) -> list[str]:
    """Distinct placeholder names in env values then args, in order of first use."""
    texts = [*descriptor.env.values(), *descriptor.args]
    names: dict[str, None] = {}
    for text in texts:
        for match in PLACEHOLDER_PATTERN.finditer(text):
            names.setdefault(match.group(1), None)
    return list(names)


def substitute(text: str, values: Mapping[str, str]) -> str:
    """Replace every known placeholder in ``text``.

    Replacement is a single pass, so a value that itself looks like a
    placeholder is inserted literally. Unknown names are left as-is.
    """
    return PLACEHOLDER_PATTERN.sub(lambda match: values.get(match.group(1), match.group(0)), text)


def resolve_descriptor(
    descriptor: McpServerDescriptor, values: Mapping[str, str]
) -> McpServerDescriptor:
    """Return a copy of ``descriptor`` with placeholders filled in from ``values``."""
    return replace(
        descriptor,
        args=[substitute(arg, values) for arg in descriptor.args],
        env={key: substitute(value, values) for key, value in descriptor.env.items()},
    )
