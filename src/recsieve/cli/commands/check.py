"""Check command - validate a filter spec file."""

import click

from ...context import pass_context
from ..helpers import load_specs


@click.command()
@click.option("--lenient", is_flag=True, help="Drop invalid filters instead of failing")
@pass_context
def check(ctx, lenient):
    """Validate the filter declarations in the spec file."""
    filters = load_specs(ctx.specs_path, strict=not lenient)
    click.echo(f"{len(filters)} valid filter(s)")
