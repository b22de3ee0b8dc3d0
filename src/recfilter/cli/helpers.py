"""Shared helpers for CLI commands."""

import json
import sys
from pathlib import Path
from typing import Any, Dict, List

import click

from recfilter import config
from recfilter.errors import CatalogError
from recfilter.home import load_json
from recfilter.models import FieldCatalog


def fail(message: str) -> None:
    """Print an error to stderr and exit with status 1."""
    click.echo(f"Error: {message}", err=True)
    sys.exit(1)


def load_condition_file(path: Path) -> List[Dict[str, Any]]:
    """Load raw conditions from a JSON file.

    Accepts either a list of conditions or ``{"conditions": [...]}``.
    """
    try:
        data = load_json(path)
    except (OSError, json.JSONDecodeError) as exc:
        fail(f"cannot read conditions from {path}: {exc}")

    if isinstance(data, dict):
        data = data.get("conditions")
    if not isinstance(data, list):
        fail(f"{path} must contain a list of conditions")
    return data


def load_catalog(catalog_path: Path | None) -> FieldCatalog:
    try:
        return config.set_catalog_path(catalog_path)
    except CatalogError as exc:
        fail(str(exc))
