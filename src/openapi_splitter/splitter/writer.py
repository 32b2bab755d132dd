"""Serialize document trees and write them under the output directory."""

import logging
from pathlib import Path

from openapi_splitter.codec import encode
from openapi_splitter.errors import WriteError
from openapi_splitter.splitter.context import SplitContext
from openapi_splitter.splitter.refs import rewrite_refs

logger = logging.getLogger(__name__)


def write_document(file_path: Path, content, context: SplitContext, rewrite: bool = True) -> Path:
    """Write `content` to `file_path` in the run's format.

    Entry files are written with `rewrite=True` so their registry pointers are
    made file-relative. Index and root documents build their pointers
    themselves and pass `rewrite=False`.
    """
    if rewrite:
        content = rewrite_refs(content, context)
    text = encode(content, context.fmt)

    try:
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(text, encoding="utf-8")
    except OSError as e:
        raise WriteError(file_path, e.strerror or str(e)) from e

    logger.debug("File written: %s", file_path)
    return file_path


def index_entry(file_name: str, context: SplitContext, base: str = ".") -> dict:
    """Pointer object referencing a sibling file."""
    return {"$ref": f"{base}/{file_name}{context.extension}"}
