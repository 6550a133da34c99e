"""recsieve CLI main entry point with global options."""

import click

from ..context import RecsieveContext, resolve_specs_path
from ..log import configure_logging


@click.group()
@click.option(
    "--specs", type=click.Path(), help="Filter spec file (overrides $RECSIEVE_SPECS)"
)
@click.option("--verbose", is_flag=True, help="Log skipped filters and dropped specs")
@click.pass_context
def cli(ctx, specs, verbose):
    """recsieve - declarative filters over NDJSON records."""
    ctx.ensure_object(RecsieveContext)
    ctx.obj.specs_path = resolve_specs_path(specs)
    configure_logging(verbose)


# Register commands at module level so tests can import cli with commands attached
from .commands.apply import apply  # noqa: E402
from .commands.check import check  # noqa: E402
from .commands.show import show  # noqa: E402

cli.add_command(apply)
cli.add_command(check)
cli.add_command(show)


def main():
    """Entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
