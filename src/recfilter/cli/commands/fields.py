"""Fields command - list the filterable fields of the active catalog."""

import click

from ..context import pass_context
from ..helpers import load_catalog


@click.command()
@click.option("--paths", is_flag=True, help="Show the record path of each field")
@pass_context
def fields(ctx, paths):
    """List catalog fields as "<key>\\t<type>\\t<operators>"."""
    catalog = load_catalog(ctx.catalog_path)
    for field in catalog.fields:
        line = f"{field.key}\t{field.type.value}\t{','.join(field.operators)}"
        if paths:
            line += f"\t{field.path or field.key}"
        click.echo(line)
