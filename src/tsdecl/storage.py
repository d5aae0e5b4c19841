"""Storage utilities for JSON files and optional side files."""

import json
from pathlib import Path


def read_json(path: Path) -> dict:
    """Read a JSON file.

    Args:
        path: Path to the JSON file.

    Returns:
        Parsed JSON object.
    """
    with open(path, 'r', encoding='utf-8') as f:
        return json.load(f)


def include_file_if_present(base_dir: Path, file: str) -> str:
    """Read a side file relative to the base directory.

    The text is returned with a blank line after it so it can be spliced
    straight into generated output.

    Args:
        base_dir: Directory the file name is relative to.
        file: File name, e.g. ``"io.vertx.core.Vertx.override.json"``.

    Returns:
        File text ending in a blank line, or "" if missing or empty.
    """
    path = Path(base_dir) / file
    if not path.exists():
        return ""

    text = path.read_text(encoding='utf-8')
    if not text:
        return ""

    if text.endswith("\n"):
        return text + "\n"
    return text + "\n\n"
