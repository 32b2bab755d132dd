"""Split the top-level `tags` list into one file per named tag."""

import logging
from pathlib import Path

from openapi_splitter.splitter.context import INDEX_NAME, TAGS_DIR, SplitContext
from openapi_splitter.splitter.normalize import unique_file_names
from openapi_splitter.splitter.writer import index_entry, write_document

logger = logging.getLogger(__name__)


def named_tags(context: SplitContext) -> list[dict]:
    """Tag objects that carry a name; the others are never split."""
    tags = context.document.get("tags")
    if not isinstance(tags, list):
        return []
    return [tag for tag in tags if isinstance(tag, dict) and tag.get("name")]


def has_tags(context: SplitContext) -> bool:
    tags = context.document.get("tags")
    return isinstance(tags, list) and len(tags) > 0


def split_tags(context: SplitContext) -> list[Path]:
    """Write each named tag to `tags/<name>` and a `tags/_index` keyed by file name.

    Unlike the component indexes, the tag index is keyed by the normalized
    name.
    """
    if not has_tags(context):
        logger.debug("No tags found in OpenAPI document")
        return []

    tags = named_tags(context)
    logger.debug("Found %d tags to split", len(tags))
    names = unique_file_names([tag["name"] for tag in tags], "tags", context.source, reserved=(INDEX_NAME,))
    tags_dir = context.category_dir(TAGS_DIR)

    written = []
    index = {}
    for tag in tags:
        file_name = names[tag["name"]]
        written.append(write_document(tags_dir / f"{file_name}{context.extension}", tag, context))
        index[file_name] = index_entry(file_name, context)

    written.append(write_document(tags_dir / f"{INDEX_NAME}{context.extension}", index, context, rewrite=False))
    return written
