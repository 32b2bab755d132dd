"""Per-run settings shared by every splitter."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict

from openapi_splitter.codec import extension_for

SCHEMAS_DIR = "schemas"
PATHS_DIR = "paths"
PARAMETERS_DIR = "parameters"
RESPONSES_DIR = "responses"
TAGS_DIR = "tags"

INDEX_NAME = "_index"
ROOT_NAME = "openapi"


class SplitContext(BaseModel):
    """Immutable settings for one split run.

    Built once by the pipeline after parsing; splitters only read from it.
    """

    model_config = ConfigDict(frozen=True)

    document: dict
    source: Path
    output_dir: Path
    fmt: Literal["json", "yaml"]

    @property
    def extension(self) -> str:
        return extension_for(self.fmt)

    def components(self) -> dict:
        components = self.document.get("components")
        return components if isinstance(components, dict) else {}

    def category_dir(self, category: str) -> Path:
        return self.output_dir / category
