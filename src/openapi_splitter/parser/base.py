"""Data models for a parsed OpenAPI document.

The document itself stays a plain tree of dicts, lists and scalars so it can
be walked and re-encoded without loss. These models only validate the parts
of the top level the splitter depends on.
"""

from typing import Any, Union

from pydantic import BaseModel, ConfigDict, field_validator

# A decoded document tree: mappings, sequences, scalars, or null.
Node = Union[dict[str, "Node"], list["Node"], str, int, float, bool, None]


class Info(BaseModel):
    """The `info` object; only title and version are required."""

    model_config = ConfigDict(extra="allow")

    title: str
    version: str

    @field_validator("version", mode="before")
    @classmethod
    def _coerce_version(cls, value: Any) -> Any:
        # YAML reads `version: 1.0` as a float
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value


class Tag(BaseModel):
    """A tag object. Tags without a name are kept in the document but never split."""

    model_config = ConfigDict(extra="allow")

    name: str | None = None
    description: str = ""


class Components(BaseModel):
    """The `components` object; each known registry must be a mapping if present."""

    model_config = ConfigDict(extra="allow")

    schemas: dict[str, Any] | None = None
    parameters: dict[str, Any] | None = None
    responses: dict[str, Any] | None = None
    securitySchemes: dict[str, Any] | None = None


class OpenApiDocument(BaseModel):
    """Top-level shape of an OpenAPI 3.x document."""

    model_config = ConfigDict(extra="allow")

    openapi: str
    info: Info
    servers: list[dict[str, Any]] | None = None
    paths: dict[str, Any] | None = None
    components: Components | None = None
    tags: list[Tag] | None = None

    @field_validator("openapi", mode="before")
    @classmethod
    def _check_version(cls, value: Any) -> Any:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            value = str(value)
        if isinstance(value, str) and not value.startswith("3."):
            raise ValueError(f"unsupported OpenAPI version {value!r}, expected 3.x")
        return value
