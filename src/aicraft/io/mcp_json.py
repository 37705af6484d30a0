"""I/O operations for the project's .mcp.json."""

from collections.abc import Callable, Generator
from contextlib import contextmanager
from pathlib import Path

from aicraft.io.json_store import read_model, write_json
from aicraft.models.mcp import ProjectMcpConfig
from aicraft.models.results import LoadResult


def read_mcp_config(config_path: Path) -> LoadResult[ProjectMcpConfig]:
    """Read .mcp.json, falling back to an empty server map."""
    return read_model(config_path, ProjectMcpConfig, ProjectMcpConfig.empty)


def load_mcp_config(config_path: Path) -> ProjectMcpConfig:
    return read_mcp_config(config_path).value


def save_mcp_config(config_path: Path, config: ProjectMcpConfig) -> None:
    """Save .mcp.json atomically."""
    write_json(config_path, config.to_dict())


@contextmanager
def modify_mcp_config(
    config_path: Path,
) -> Generator[tuple[LoadResult[ProjectMcpConfig], Callable[[ProjectMcpConfig], None]]]:
    """Context manager for read-modify-write access to .mcp.json.

    Yields:
        Tuple of (load_result, save_function)

    Example:
        with modify_mcp_config(path) as (loaded, save):
            save(loaded.value.with_server("playwright", entry))
    """
    loaded = read_mcp_config(config_path)

    def save_fn(new_config: ProjectMcpConfig) -> None:
        save_mcp_config(config_path, new_config)

    yield loaded, save_fn
