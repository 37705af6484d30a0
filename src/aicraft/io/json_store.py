"""Shared read/write helpers for the project's JSON stores.

Reads never raise for absent or malformed files: the caller gets a default
value and a status saying why. Writes are atomic (temporary file, then
rename) so an interrupted command never leaves half a file behind.
"""

import json
import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ValidationError

from aicraft.models.results import LoadResult

logger = logging.getLogger(__name__)


def read_model[M: BaseModel](
    path: Path, model: type[M], default: Callable[[], M]
) -> LoadResult[M]:
    """Read and validate a JSON file.

    Args:
        path: File to read
        model: Pydantic model describing the file
        default: Factory for the value used when the file is absent or invalid

    Returns:
        LoadResult with status "loaded", "missing" or "corrupt"
    """
    if not path.exists():
        logger.debug("%s does not exist, using defaults", path)
        return LoadResult(default(), "missing")

    try:
        text = path.read_text(encoding="utf-8")
        value = model.model_validate_json(text)
    except (OSError, UnicodeDecodeError, ValidationError) as e:
        logger.debug("%s is unreadable, using defaults: %s", path, e)
        return LoadResult(default(), "corrupt")

    return LoadResult(value, "loaded")


def write_json(path: Path, data: dict[str, Any]) -> None:
    """Write pretty-printed JSON atomically.

    Creates parent directories if they don't exist. Key order is kept as
    given so entries the user wrote stay where they were.

    Args:
        path: Destination file
        data: JSON-serializable mapping
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    temp_path = path.with_name(path.name + ".tmp")
    with temp_path.open("w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
        f.write("\n")

    temp_path.replace(path)
