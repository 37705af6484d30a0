"""Project metadata detection for the CLAUDE.md header."""

import json
import logging
import tomllib
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_PROJECT_DESCRIPTION = "Your project description here."


@dataclass(frozen=True)
class ProjectInfo:
    name: str
    description: str


def read_project_info(project_root: Path) -> ProjectInfo:
    """Work out the project's name and description.

    Looks at pyproject.toml's [project] table first, then package.json, and
    finally falls back to the directory name.
    """
    name: str | None = None
    description: str | None = None

    pyproject_path = project_root / "pyproject.toml"
    if pyproject_path.exists():
        try:
            with pyproject_path.open("rb") as f:
                project = tomllib.load(f).get("project", {})
        except (OSError, tomllib.TOMLDecodeError) as e:
            logger.debug("Ignoring unreadable %s: %s", pyproject_path, e)
            project = {}
        name = project.get("name")
        description = project.get("description")

    package_json_path = project_root / "package.json"
    if name is None and package_json_path.exists():
        try:
            package = json.loads(package_json_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.debug("Ignoring unreadable %s: %s", package_json_path, e)
            package = {}
        if isinstance(package, dict):
            name = package.get("name")
            description = description or package.get("description")

    return ProjectInfo(
        name=name or project_root.name,
        description=description or DEFAULT_PROJECT_DESCRIPTION,
    )
