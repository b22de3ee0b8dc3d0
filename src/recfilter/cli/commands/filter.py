"""Filter command - keep NDJSON records matching every condition."""

import logging
import sys
from pathlib import Path

import click
from pydantic import ValidationError

from ...engine import apply_filters
from ...models import parse_conditions
from ...writers import read_ndjson, write_ndjson
from ..context import pass_context
from ..helpers import fail, load_catalog, load_condition_file

logger = logging.getLogger(__name__)


@click.command()
@click.argument(
    "conditions_file",
    metavar="CONDITIONS",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "-i",
    "--input",
    "input_stream",
    type=click.File("r"),
    default="-",
    help="NDJSON input (default: stdin)",
)
@click.option(
    "-o",
    "--output",
    "output_file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write matches to a file instead of stdout",
)
@pass_context
def filter(ctx, conditions_file, input_stream, output_file):
    """Filter NDJSON records by the conditions in CONDITIONS.

    Conditions are combined with AND. Nested fields are resolved through the
    catalog's field paths (e.g. "address.city"). If any condition is invalid
    nothing is written and the command exits with status 1.

    Examples:
        recfilter filter conditions.json < employees.ndjson
        recfilter --catalog fields.json filter conditions.json -i data.ndjson
    """
    catalog = load_catalog(ctx.catalog_path)
    raw_conditions = load_condition_file(conditions_file)

    try:
        conditions = parse_conditions(raw_conditions)
    except ValidationError as exc:
        fail(f"malformed condition in {conditions_file}: {exc.error_count()} error(s)")

    for condition in conditions:
        if not catalog.allows(condition):
            logger.warning(
                "Condition %s (%s %s) is not declared by the catalog",
                condition.id,
                condition.field,
                condition.operator,
            )

    try:
        records = list(read_ndjson(input_stream))
    except ValueError as exc:
        fail(f"invalid NDJSON input: {exc}")

    outcome = apply_filters(records, conditions, catalog.field_paths())
    if not outcome.applied:
        for condition_id in outcome.errors:
            click.echo(f"Invalid condition: {condition_id}", err=True)
        sys.exit(1)

    write_ndjson(outcome.records, output_file)
