"""Rewrite internal `$ref` pointers so they resolve across split files."""

import logging
from urllib.parse import unquote

from openapi_splitter.parser.base import Node
from openapi_splitter.splitter.context import (
    PARAMETERS_DIR,
    RESPONSES_DIR,
    SCHEMAS_DIR,
    SplitContext,
)
from openapi_splitter.splitter.normalize import normalize_name

logger = logging.getLogger(__name__)

REF_KEY = "$ref"

# Pointer prefix -> output directory holding that registry's entries
REGISTRY_PREFIXES = {
    "#/components/schemas/": SCHEMAS_DIR,
    "#/components/parameters/": PARAMETERS_DIR,
    "#/components/responses/": RESPONSES_DIR,
}


def rewrite_refs(node: Node, context: SplitContext, base: str = "..") -> Node:
    """Return a copy of `node` with registry pointers turned into file pointers.

    `base` is the path from the file being written to the output root: ".."
    for files inside a category directory, "." for the root document. The
    input tree is never modified.
    """
    if isinstance(node, dict):
        result = {}
        for key, value in node.items():
            if key == REF_KEY and isinstance(value, str):
                result[key] = rewrite_pointer(value, context, base)
            else:
                result[key] = rewrite_refs(value, context, base)
        return result
    if isinstance(node, list):
        return [rewrite_refs(item, context, base) for item in node]
    return node


def rewrite_pointer(pointer: str, context: SplitContext, base: str = "..") -> str:
    """Rewrite a single pointer, or return it unchanged if it is foreign."""
    for prefix, category in REGISTRY_PREFIXES.items():
        if not pointer.startswith(prefix):
            continue
        entry, _, inner = pointer[len(prefix):].partition("/")
        if not entry:
            break
        target = f"{base}/{category}/{normalize_name(_unescape(entry))}{context.extension}"
        if inner:
            target += f"#/{inner}"
        logger.debug("Updated reference: %s -> %s", pointer, target)
        return target
    return pointer


def _unescape(token: str) -> str:
    """Decode one JSON pointer reference token from a URI fragment."""
    return unquote(token).replace("~1", "/").replace("~0", "~")
