"""Split the reusable component registries (schemas, parameters, responses).

Each registry becomes a directory holding one file per entry plus an
`_index` file mapping every original entry name to its file.
"""

import logging
from pathlib import Path

from openapi_splitter.splitter.context import (
    INDEX_NAME,
    PARAMETERS_DIR,
    RESPONSES_DIR,
    SCHEMAS_DIR,
    SplitContext,
)
from openapi_splitter.splitter.normalize import unique_file_names
from openapi_splitter.splitter.writer import index_entry, write_document

logger = logging.getLogger(__name__)


def split_schemas(context: SplitContext) -> list[Path]:
    return _split_registry(context, "schemas", SCHEMAS_DIR)


def split_parameters(context: SplitContext) -> list[Path]:
    return _split_registry(context, "parameters", PARAMETERS_DIR)


def split_responses(context: SplitContext) -> list[Path]:
    return _split_registry(context, "responses", RESPONSES_DIR)


def _split_registry(context: SplitContext, registry: str, category: str) -> list[Path]:
    """Write one file per registry entry, then the registry's index file.

    Returns the written paths; empty when the registry is absent.
    """
    entries = context.components().get(registry)
    if entries is None:
        logger.debug("No %s found in OpenAPI document", registry)
        return []

    logger.debug("Found %d %s to split", len(entries), registry)
    names = unique_file_names(entries, registry, context.source, reserved=(INDEX_NAME,))
    category_dir = context.category_dir(category)

    written = []
    index = {}
    for key, entry in entries.items():
        file_name = names[key]
        written.append(write_document(category_dir / f"{file_name}{context.extension}", entry, context))
        index[key] = index_entry(file_name, context)

    index_path = category_dir / f"{INDEX_NAME}{context.extension}"
    written.append(write_document(index_path, index, context, rewrite=False))
    return written
