"""Utility functions for loading model documents and writing source files.

This module is the only place that touches the file system: rendering itself
is pure, and writing is a blocking call whose OS errors propagate unchanged.
"""

import json
from pathlib import Path
from typing import Any, Dict

from .logging_config import get_logger

logger = get_logger(__name__)


class ModelLoaderError(Exception):
    """Raised when a model document cannot be read or parsed."""

    pass


def load_model_file(file_path: str | Path) -> Dict[str, Any]:
    """Load a JSON model document from a local file.

    Args:
        file_path: Path to the JSON file.

    Returns:
        Parsed JSON object.

    Raises:
        FileNotFoundError: If file doesn't exist.
        ModelLoaderError: If file cannot be read, JSON is invalid, or the
            top-level value is not an object.
    """
    file_path = Path(file_path)
    logger.debug(f"Attempting to load model from file: {file_path}")

    if not file_path.exists():
        logger.error(f"File not found: {file_path}")
        raise FileNotFoundError(f"File not found: {file_path}")

    if file_path.suffix.lower() != ".json":
        logger.warning(f"File does not have .json extension: {file_path}")

    try:
        with file_path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON in file {file_path}: {e}")
        raise ModelLoaderError(f"Invalid JSON in file {file_path}: {e}") from e
    except OSError as e:
        logger.error(f"Error reading file {file_path}: {e}", exc_info=True)
        raise ModelLoaderError(f"Error reading file {file_path}: {e}") from e

    if not isinstance(data, dict):
        raise ModelLoaderError(f"Model file must contain a JSON object: {file_path}")

    logger.info(f"Successfully loaded model from {file_path}")
    return data


def write_source(file_path: str | Path, content: str, line_ending: str = "\n") -> Path:
    """Write rendered source text as UTF-8, creating parent directories.

    Args:
        file_path: Target path.
        content: Rendered text using ``\\n`` line breaks.
        line_ending: Line terminator to write.

    Returns:
        The path written to.
    """
    file_path = Path(file_path)
    if line_ending != "\n":
        content = content.replace("\n", line_ending)

    file_path.parent.mkdir(parents=True, exist_ok=True)
    with file_path.open("w", encoding="utf-8", newline="") as f:
        f.write(content)

    logger.info(f"Wrote {len(content)} characters to {file_path}")
    return file_path
