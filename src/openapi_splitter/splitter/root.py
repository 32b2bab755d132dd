"""Build the root OpenAPI document that ties the split files together."""

import logging
from pathlib import Path

from openapi_splitter.splitter.context import (
    INDEX_NAME,
    PARAMETERS_DIR,
    PATHS_DIR,
    RESPONSES_DIR,
    ROOT_NAME,
    SCHEMAS_DIR,
    TAGS_DIR,
    SplitContext,
)
from openapi_splitter.splitter.paths import route_file_names
from openapi_splitter.splitter.refs import rewrite_refs
from openapi_splitter.splitter.tags import has_tags
from openapi_splitter.splitter.writer import index_entry, write_document

logger = logging.getLogger(__name__)

# Top-level fields copied verbatim, in output order
PASSTHROUGH_FIELDS = ("openapi", "info", "servers", "security", "externalDocs")

# Component registries replaced by a pointer to their index file
SPLIT_COMPONENTS = {
    "schemas": SCHEMAS_DIR,
    "parameters": PARAMETERS_DIR,
    "responses": RESPONSES_DIR,
}

VERBATIM_COMPONENTS = ("securitySchemes",)


def build_root(context: SplitContext) -> dict:
    """Assemble the root document. Does not check that referenced files exist."""
    doc = context.document
    root = {}
    for field in PASSTHROUGH_FIELDS:
        if field in doc:
            root[field] = doc[field]

    root["paths"] = {}
    for route, file_name in route_file_names(context).items():
        logger.debug("Adding path reference for %s -> %s", route, file_name)
        root["paths"][route] = index_entry(file_name, context, base=f"./{PATHS_DIR}")

    components = {}
    for registry, section in context.components().items():
        if registry in SPLIT_COMPONENTS:
            if section is not None:
                components[registry] = index_entry(INDEX_NAME, context, base=f"./{SPLIT_COMPONENTS[registry]}")
        elif registry in VERBATIM_COMPONENTS:
            components[registry] = section
        else:
            # Sections that are not split stay inline; their pointers now
            # start from the output root.
            components[registry] = rewrite_refs(section, context, base=".")
    if components:
        root["components"] = components

    if has_tags(context):
        root["tags"] = index_entry(INDEX_NAME, context, base=f"./{TAGS_DIR}")

    return root


def write_root(context: SplitContext) -> Path:
    root_path = context.output_dir / f"{ROOT_NAME}{context.extension}"
    return write_document(root_path, build_root(context), context, rewrite=False)
