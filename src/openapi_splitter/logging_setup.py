"""Logging configuration for the command line."""

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

LOG_LEVEL_ENV = "OPENAPI_SPLITTER_LOG_LEVEL"
DEFAULT_LEVEL_NAME = "INFO"

console = Console(stderr=True)


def _resolve_level(debug: bool) -> int:
    if debug:
        return logging.DEBUG
    level_name = os.getenv(LOG_LEVEL_ENV, DEFAULT_LEVEL_NAME).upper()
    return getattr(logging, level_name, logging.INFO)


def configure_logging(debug: bool = False) -> None:
    """Route log records through a single Rich handler on the root logger.

    A handler installed by an earlier call is replaced, not stacked. Handlers
    installed by anything else are left alone.
    """
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        if getattr(handler, "_openapi_splitter_managed", False):
            root_logger.removeHandler(handler)

    handler = RichHandler(console=console, show_path=False, rich_tracebacks=True)
    handler.setFormatter(logging.Formatter("%(message)s"))
    handler._openapi_splitter_managed = True
    root_logger.addHandler(handler)
    root_logger.setLevel(_resolve_level(debug))
