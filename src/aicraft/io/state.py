"""Local install record I/O for .aicraft/config.json."""

from pathlib import Path

from aicraft.io.json_store import read_model, write_json
from aicraft.models.local_config import LocalConfig
from aicraft.models.results import LoadResult


def create_default_config() -> LocalConfig:
    """Config used for a project that has nothing installed yet."""
    return LocalConfig()


def read_local_config(config_path: Path) -> LoadResult[LocalConfig]:
    """Read the install record, reporting whether defaults were used.

    A malformed file is treated exactly like a missing one.
    """
    return read_model(config_path, LocalConfig, create_default_config)


def load_local_config(config_path: Path) -> LocalConfig:
    """Load the install record, or the default config if there is none."""
    return read_local_config(config_path).value


def save_local_config(config_path: Path, config: LocalConfig) -> None:
    """Overwrite the install record with ``config``."""
    write_json(config_path, config.to_dict())
