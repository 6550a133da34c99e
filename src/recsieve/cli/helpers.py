"""Shared helpers for CLI commands."""

import sys
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import click

from ..context import load_declarations
from ..models import Error, FilterSpec, SpecValidationError
from ..registry import validate


def fail(error: Error) -> None:
    """Report an error on stderr and exit with status 1."""
    click.echo(f"Error: {error}", err=True)
    sys.exit(1)


def load_specs(path: Optional[Path], strict: bool = True) -> List[FilterSpec]:
    """Read and validate the resolved filter spec file, or exit."""
    if path is None:
        fail(Error(message="no spec file (use --specs or $RECSIEVE_SPECS)"))

    try:
        return validate(load_declarations(path), strict=strict)
    except SpecValidationError as e:
        fail(Error(message=f"invalid filter in {path}: {e}"))
    except ValueError as e:
        fail(Error(message=str(e)))


def parse_assignments(assignments: Tuple[str, ...]) -> Dict[str, str]:
    """Parse repeated ``field=value`` options into an active value mapping.

    Later assignments to the same field win.
    """
    active: Dict[str, str] = {}
    for assignment in assignments:
        field, sep, value = assignment.partition("=")
        if not sep or not field:
            raise click.BadParameter(
                f"expected field=value, got {assignment!r}", param_hint="--set"
            )
        active[field] = value
    return active
