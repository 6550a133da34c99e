"""Context for passing state between CLI commands."""

import json
import os
from pathlib import Path
from typing import Any, List, Optional

import click

SPECS_ENV = "RECSIEVE_SPECS"
PROJECT_DIR = ".recsieve"
SPECS_FILENAME = "filters.json"


def _find_project_specs(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Walk up from start_dir looking for .recsieve/filters.json.

    Args:
        start_dir: Directory to start searching from (default: CWD)

    Returns:
        Path to the first spec file found, or None if not found.
    """
    current = (start_dir or Path.cwd()).resolve()

    while True:
        candidate = current / PROJECT_DIR / SPECS_FILENAME
        if candidate.is_file():
            return candidate

        # Stop at root directory
        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def resolve_specs_path(specs_option: Optional[str]) -> Optional[Path]:
    """Resolve the filter spec file.

    Resolution order:
    1. --specs CLI flag (explicit override)
    2. $RECSIEVE_SPECS environment variable
    3. Walk up from CWD looking for .recsieve/filters.json

    Args:
        specs_option: Value of --specs CLI option if provided

    Returns:
        Path to the spec file, or None if nothing was found
    """
    if specs_option:
        return Path(specs_option)

    env_specs = os.environ.get(SPECS_ENV)
    if env_specs:
        return Path(env_specs)

    return _find_project_specs()


def load_declarations(path: Path) -> List[Any]:
    """Load raw filter declarations from a JSON spec file.

    Raises:
        ValueError: If the file is unreadable or not a JSON array
    """
    try:
        data = json.loads(path.read_text())
    except OSError as e:
        raise ValueError(f"cannot read spec file {path}: {e.strerror}") from e
    except json.JSONDecodeError as e:
        raise ValueError(f"spec file {path} is not valid JSON: {e.msg}") from e

    if not isinstance(data, list):
        raise ValueError(f"spec file {path} must contain a JSON array")
    return data


class RecsieveContext:
    def __init__(self):
        self.specs_path = None


pass_context = click.make_pass_decorator(RecsieveContext, ensure=True)
