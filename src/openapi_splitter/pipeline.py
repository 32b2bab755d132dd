"""Split pipeline: parse an OpenAPI file and write it out as a tree of files.

Stages run strictly in order. Any failure aborts the run; files already
written are left on disk and removed by the next run's clear step.
"""

import enum
import logging
import shutil
from pathlib import Path

from pydantic import BaseModel

from openapi_splitter.errors import SplitterError, WriteError
from openapi_splitter.parser.detect import detect_format
from openapi_splitter.parser.openapi import parse_openapi
from openapi_splitter.splitter.components import split_parameters, split_responses, split_schemas
from openapi_splitter.splitter.context import INDEX_NAME, SplitContext
from openapi_splitter.splitter.normalize import unique_file_names
from openapi_splitter.splitter.paths import split_paths
from openapi_splitter.splitter.root import write_root
from openapi_splitter.splitter.tags import named_tags, split_tags

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT = Path("openapi-split")


class Stage(str, enum.Enum):
    RESOLVE_OUTPUT = "resolve-output-path"
    PARSE_INPUT = "parse-input"
    CHECK_NAMES = "check-names"
    CLEAR_OUTPUT = "clear-output"
    CREATE_SKELETON = "create-skeleton-dirs"
    SPLIT_SCHEMAS = "split-types"
    SPLIT_PATHS = "split-endpoints"
    SPLIT_PARAMETERS = "split-parameters"
    SPLIT_RESPONSES = "split-responses"
    SPLIT_TAGS = "split-tags"
    BUILD_ROOT = "build-root"


SPLITTERS = (
    (Stage.SPLIT_SCHEMAS, split_schemas),
    (Stage.SPLIT_PATHS, split_paths),
    (Stage.SPLIT_PARAMETERS, split_parameters),
    (Stage.SPLIT_RESPONSES, split_responses),
    (Stage.SPLIT_TAGS, split_tags),
)


class SplitResult(BaseModel):
    """Outcome of a successful run."""

    output_dir: Path
    root_file: Path
    files: list[Path]


def split_openapi(input_file: Path, output: Path = DEFAULT_OUTPUT, fmt: str | None = None) -> SplitResult:
    """Split `input_file` into a directory of files under `output`.

    `fmt` is 'json' or 'yaml'; when omitted the input's own encoding is used.
    Raises SplitterError on the first failure.
    """
    stage = Stage.RESOLVE_OUTPUT
    try:
        output_dir = output.resolve()
        input_file = Path(input_file)

        stage = Stage.PARSE_INPUT
        document = parse_openapi(input_file)
        fmt = fmt or detect_format(input_file)
        context = SplitContext(document=document, source=input_file.resolve(), output_dir=output_dir, fmt=fmt)
        logger.debug("Input file: %s", context.source)
        logger.debug("Output directory: %s", output_dir)
        logger.debug("Format: %s (%s)", fmt, context.extension)

        stage = Stage.CHECK_NAMES
        check_file_names(context)

        stage = Stage.CLEAR_OUTPUT
        _clear_output(output_dir)

        stage = Stage.CREATE_SKELETON
        _make_dir(output_dir)

        files = []
        for stage, splitter in SPLITTERS:
            logger.debug("Running stage %s", stage.value)
            files.extend(splitter(context))

        stage = Stage.BUILD_ROOT
        root_file = write_root(context)
        files.append(root_file)
    except SplitterError as e:
        # The caller reports the error itself
        logger.debug("Error splitting OpenAPI specification during %s: %s", stage.value, e)
        raise

    logger.debug("OpenAPI specification split into %s (%d files)", output_dir, len(files))
    return SplitResult(output_dir=output_dir, root_file=root_file, files=files)


def check_file_names(context: SplitContext) -> None:
    """Fail before writing anything if two keys of one registry share a file name."""
    components = context.components()
    for registry in ("schemas", "parameters", "responses"):
        unique_file_names(components.get(registry) or {}, registry, context.source, reserved=(INDEX_NAME,))
    unique_file_names(context.document.get("paths") or {}, "paths", context.source)
    unique_file_names([tag["name"] for tag in named_tags(context)], "tags", context.source, reserved=(INDEX_NAME,))


def _clear_output(output_dir: Path) -> None:
    if not output_dir.exists() and not output_dir.is_symlink():
        return
    logger.debug("Removing existing output %s", output_dir)
    try:
        if output_dir.is_dir() and not output_dir.is_symlink():
            shutil.rmtree(output_dir)
        else:
            output_dir.unlink()
    except OSError as e:
        raise WriteError(output_dir, e.strerror or str(e)) from e


def _make_dir(path: Path) -> None:
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise WriteError(path, e.strerror or str(e)) from e
    logger.debug("Created directory: %s", path)
