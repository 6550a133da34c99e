"""Apply command - filter NDJSON records."""

import sys

import click

from ...context import pass_context
from ...engine import apply as apply_filters
from ...models import Error
from ...streaming import read_records, write_records
from ..helpers import fail, load_specs, parse_assignments


@click.command()
@click.argument("source", required=False, type=click.File("r"))
@click.option(
    "-s",
    "--set",
    "assignments",
    multiple=True,
    help="Active value as field=value (repeatable)",
)
@pass_context
def apply(ctx, source, assignments):
    """Keep the records matching every active filter.

    Examples:
        recsieve --specs filters.json apply vets.ndjson -s name=an
        cat vets.ndjson | recsieve apply -s rating=3   # specs from $RECSIEVE_SPECS
    """
    filters = load_specs(ctx.specs_path)
    active = parse_assignments(assignments)

    try:
        records = read_records(source or sys.stdin)
    except ValueError as e:
        fail(Error(message=str(e)))

    write_records(apply_filters(records, filters, active), sys.stdout)
