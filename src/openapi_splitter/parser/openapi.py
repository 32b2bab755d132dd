"""OpenAPI 3.x document parser.

Reads a JSON or YAML file into a plain document tree and validates its top
level before any splitting starts.
"""

import json
import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from openapi_splitter.codec import decode
from openapi_splitter.errors import InputError
from openapi_splitter.parser.base import OpenApiDocument
from openapi_splitter.parser.detect import detect_format

logger = logging.getLogger(__name__)


def parse_openapi(file_path: Path) -> dict:
    """Parse and validate an OpenAPI file, returning the document tree."""
    file_path = file_path.resolve()
    if not file_path.is_file():
        raise InputError(file_path, "file not found")

    try:
        text = file_path.read_text(encoding="utf-8")
        fmt = detect_format(file_path)
    except (OSError, UnicodeDecodeError) as e:
        raise InputError(file_path, f"cannot read file: {e}") from e

    logger.debug("Decoding %s as %s", file_path, fmt)
    try:
        doc = decode(text, fmt)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise InputError(file_path, f"invalid {fmt.upper()}: {e}") from e

    if not isinstance(doc, dict):
        raise InputError(file_path, "document is empty or not a mapping")

    try:
        OpenApiDocument.model_validate(doc)
    except ValidationError as e:
        raise InputError(file_path, f"invalid OpenAPI document:\n{e}") from e

    return doc
