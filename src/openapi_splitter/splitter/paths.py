"""Split the `paths` registry into one file per route.

Routes get no index file; the root document points at each route file
directly.
"""

import logging
from pathlib import Path

from openapi_splitter.splitter.context import PATHS_DIR, SplitContext
from openapi_splitter.splitter.normalize import unique_file_names
from openapi_splitter.splitter.writer import write_document

logger = logging.getLogger(__name__)


def route_file_names(context: SplitContext) -> dict[str, str]:
    """Map every route in the document to its file name (without extension)."""
    paths = context.document.get("paths") or {}
    return unique_file_names(paths, "paths", context.source)


def split_paths(context: SplitContext) -> list[Path]:
    paths = context.document.get("paths")
    if not paths:
        logger.debug("No paths found in OpenAPI document")
        return []

    logger.debug("Found %d paths to split", len(paths))
    paths_dir = context.category_dir(PATHS_DIR)

    written = []
    for route, file_name in route_file_names(context).items():
        logger.debug('Processing path: "%s" -> filename: "%s%s"', route, file_name, context.extension)
        written.append(write_document(paths_dir / f"{file_name}{context.extension}", paths[route], context))
    return written
