"""recfilter CLI main entry point with global options."""

import click

from .context import RecfilterContext, configure_logging


@click.group()
@click.option(
    "--catalog",
    type=click.Path(dir_okay=False),
    help="Field catalog JSON (overrides $RECFILTER_CATALOG)",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx, catalog, verbose):
    """recfilter - typed condition filtering for NDJSON records."""
    ctx.ensure_object(RecfilterContext)
    ctx.obj.catalog_path = catalog
    ctx.obj.verbose = verbose
    configure_logging(verbose)


# Register commands at module level so tests can import cli with commands attached
from .commands.fields import fields
from .commands.filter import filter
from .commands.validate import validate

cli.add_command(fields)
cli.add_command(filter)
cli.add_command(validate)


def main():
    """Entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
