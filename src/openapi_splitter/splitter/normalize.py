"""Map registry keys and route strings to safe file names."""

import re
from pathlib import Path

from openapi_splitter.errors import NameCollisionError

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9]")
_UNDERSCORE_RUN = re.compile(r"_{2,}")

# File name used when a key normalizes to nothing, e.g. the route "/"
EMPTY_NAME = "root"


def normalize_name(key: str) -> str:
    """Normalize a registry key or route into a file name component.

    Strips one leading slash, replaces every non-alphanumeric character with
    an underscore, and collapses runs of underscores:

        >>> normalize_name("/pets/{petId}")
        'pets_petId_'
    """
    name = key[1:] if key.startswith("/") else key
    name = _UNSAFE_CHARS.sub("_", name)
    name = _UNDERSCORE_RUN.sub("_", name)
    return name or EMPTY_NAME


def unique_file_names(keys, registry: str, source: Path, reserved: tuple[str, ...] = ()) -> dict[str, str]:
    """Normalize every key of one registry, refusing keys that would share a file.

    `reserved` holds file names already taken in the registry's directory,
    such as its index file. Returns a dict of {key: file name}. Raises
    NameCollisionError naming the first two keys found to collide.
    """
    names: dict[str, str] = {}
    owners: dict[str, str] = {}
    for key in keys:
        name = normalize_name(key)
        if name in reserved:
            raise NameCollisionError(source, registry, (key, f"{name} (index file)"), name)
        if name in owners and owners[name] != key:
            raise NameCollisionError(source, registry, (owners[name], key), name)
        owners[name] = key
        names[key] = name
    return names
