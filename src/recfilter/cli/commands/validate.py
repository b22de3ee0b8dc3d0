"""Validate command - report which conditions are well-formed."""

import sys
from pathlib import Path

import click

from ...engine import validate_conditions
from ..helpers import load_condition_file


@click.command()
@click.argument(
    "conditions_file",
    metavar="CONDITIONS",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
def validate(conditions_file):
    """Check each condition in CONDITIONS without touching any records.

    Prints one "<id>\\t<valid|invalid>" line per condition and exits with
    status 1 if any condition is invalid. Conditions without an id are
    reported by position.
    """
    results = validate_conditions(load_condition_file(conditions_file))
    for condition_id, valid in results.items():
        click.echo(f"{condition_id}\t{'valid' if valid else 'invalid'}")

    if not all(results.values()):
        sys.exit(1)
