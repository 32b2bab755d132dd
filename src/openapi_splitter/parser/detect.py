"""Detect whether an OpenAPI file is encoded as JSON or YAML."""

from pathlib import Path

EXTENSIONS = {
    ".json": "json",
    ".yaml": "yaml",
    ".yml": "yaml",
}


def detect_format(file_path: Path) -> str:
    """Detect the encoding of an OpenAPI file.

    The file extension decides when it is a known one. Otherwise a document
    whose first non-blank character is `{` is treated as JSON.

    Returns: 'json' or 'yaml'.
    """
    fmt = EXTENSIONS.get(file_path.suffix.lower())
    if fmt:
        return fmt

    text = file_path.read_text(encoding="utf-8")
    if text.lstrip().startswith("{"):
        return "json"
    return "yaml"
