"""Local file I/O utilities."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


def read_json(path: str | Path) -> Any:
    """Read a JSON document from a local file."""
    filepath = Path(path)
    with filepath.open(encoding="utf-8") as f:
        data = json.load(f)
    logger.info("Read %s", filepath)
    return data


def write_json(path: str | Path, data: Any) -> Path:
    """
    Write a JSON document to a local file, creating parent directories.

    Keys keep their insertion order and no whitespace is added between
    items, so identical input always produces identical bytes.

    Args:
        path: Destination file path
        data: JSON-serializable value

    Returns:
        Path to the written file.
    """
    filepath = Path(path)
    filepath.parent.mkdir(parents=True, exist_ok=True)
    with filepath.open("w", encoding="utf-8") as f:
        json.dump(data, f, ensure_ascii=False, allow_nan=False, separators=(",", ":"))
    logger.info("Wrote %s", filepath)
    return filepath
