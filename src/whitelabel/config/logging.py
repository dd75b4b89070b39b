"""Logging setup using rich for console output."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

_CONFIGURED = False


def setup_logging(level: str = "WARNING") -> None:
    """Configure the ``whitelabel`` logger hierarchy.

    Log records go to stderr through a RichHandler so they never mix with
    command output. Calling this again only adjusts the level.
    """
    global _CONFIGURED
    root = logging.getLogger("whitelabel")
    root.setLevel(level.upper())
    if _CONFIGURED:
        return
    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    root.addHandler(handler)
    root.propagate = False
    _CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a module, e.g. ``get_logger(__name__)``."""
    return logging.getLogger(name)
