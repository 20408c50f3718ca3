"""Logging setup for the command-line tools."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


def configure_logging(verbose: bool) -> None:
    """Send ``slidepuzzle`` debug logs to stderr when *verbose* is set."""
    if not verbose:
        return
    root = logging.getLogger("slidepuzzle")
    if not any(isinstance(h, RichHandler) for h in root.handlers):
        handler = RichHandler(console=Console(stderr=True), show_path=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
        root.addHandler(handler)
    root.setLevel(logging.DEBUG)
