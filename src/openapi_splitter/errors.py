"""Exceptions raised while splitting an OpenAPI document.

Input errors are raised before anything is written. Write errors can leave
already-written sibling files on disk; the next run clears them.
"""

from pathlib import Path


class SplitterError(Exception):
    """Base class for every fatal splitter failure."""


class InputError(SplitterError):
    """The input file is missing, unreadable, or not a valid OpenAPI document."""

    def __init__(self, path: Path, message: str):
        self.path = path
        super().__init__(f"{path}: {message}")


class NameCollisionError(InputError):
    """Two distinct registry keys normalize to the same file name."""

    def __init__(self, path: Path, registry: str, names: tuple[str, str], filename: str):
        self.registry = registry
        self.names = names
        super().__init__(
            path,
            f"{registry} keys {names[0]!r} and {names[1]!r} both map to {filename!r}",
        )


class WriteError(SplitterError):
    """A file or directory under the output tree could not be created or removed."""

    def __init__(self, path: Path, message: str):
        self.path = path
        super().__init__(f"Failed to write {path}: {message}")
