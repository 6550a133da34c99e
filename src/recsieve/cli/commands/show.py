"""Show command - list filters with their labels and choices."""

import click

from ...context import pass_context
from ...labels import choices, describe
from ..helpers import load_specs


@click.command()
@pass_context
def show(ctx):
    """Print each filter's label, and the choices of selection filters."""
    for spec in load_specs(ctx.specs_path):
        click.echo(describe(spec))
        for label, value in choices(spec):
            click.echo(f"  {label} = {value}")
