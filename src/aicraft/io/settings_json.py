"""I/O operations for .claude/settings.local.json.

This module provides safe read/write operations for the local settings file
with atomic writes.
"""

from collections.abc import Callable, Generator
from contextlib import contextmanager
from pathlib import Path

from aicraft.io.json_store import read_model, write_json
from aicraft.models.results import LoadResult
from aicraft.models.settings import ProjectSettings


def read_settings(settings_path: Path) -> LoadResult[ProjectSettings]:
    """Read settings, falling back to defaults when absent or malformed."""
    return read_model(settings_path, ProjectSettings, ProjectSettings.default)


def load_settings(settings_path: Path) -> ProjectSettings:
    return read_settings(settings_path).value


def save_settings(settings_path: Path, settings: ProjectSettings) -> None:
    """Save settings atomically, creating .claude/ if needed."""
    write_json(settings_path, settings.to_dict())


@contextmanager
def modify_settings(
    settings_path: Path,
) -> Generator[tuple[LoadResult[ProjectSettings], Callable[[ProjectSettings], None]]]:
    """Context manager for modifying settings.

    Yields:
        Tuple of (load_result, save_function)

    Example:
        with modify_settings(path) as (loaded, save):
            save(enable_servers(loaded.value, ["playwright"]))
    """
    loaded = read_settings(settings_path)

    def save_fn(new_settings: ProjectSettings) -> None:
        save_settings(settings_path, new_settings)

    yield loaded, save_fn
