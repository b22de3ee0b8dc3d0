"""CLI context for passing state between commands."""

import logging
from pathlib import Path
from typing import Optional

import click


class RecfilterContext:
    def __init__(self):
        self.catalog_path: Optional[Path] = None
        self.verbose = False


pass_context = click.make_pass_decorator(RecfilterContext, ensure=True)


def configure_logging(verbose: bool) -> None:
    """Send library logging to stderr; DEBUG when verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
