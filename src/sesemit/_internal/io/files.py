"""Read JSON input and write text output."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any


def load_json_tree(path: Path) -> Any:
    """Read a UTF-8 JSON document into plain dicts/lists/scalars.

    Raises:
        FileNotFoundError: if path does not exist
        ValueError: if the file is not valid UTF-8 or not valid JSON
    """
    if not path.exists():
        raise FileNotFoundError(f"Input file not found: {path}")
    raw = path.read_text(encoding="utf-8")
    return parse_json_text(raw)


def parse_json_text(raw: str) -> Any:
    try:
        return json.loads(raw)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON: {e}") from e


def prepare_destination(path: Path) -> None:
    """Create path's parent directories and fail early if path cannot be a file.

    Raises:
        OSError: parent cannot be created (e.g. a component is a regular file)
        IsADirectoryError: path itself is an existing directory
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    if path.is_dir():
        raise IsADirectoryError(f"Output path is a directory: {path}")


def write_text_file(path: Path, content: str) -> None:
    """Write content as UTF-8, creating parent directories and truncating any existing file."""
    prepare_destination(path)
    path.write_text(content, encoding="utf-8")
