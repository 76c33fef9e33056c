"""Logging setup shared by the CLI entry-points.

Diagnostics go to stderr through Rich so they never mix with the answer
printed on stdout.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


def configure_logging(verbose: bool = False) -> None:
    """Install a single Rich handler on the root logger."""

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=verbose,
    )
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[handler],
        force=True,
    )
    # httpx/httpcore are chatty at DEBUG; keep their request lines only.
    logging.getLogger("httpcore").setLevel(logging.WARNING)
