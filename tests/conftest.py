"""Pytest configuration and shared fixtures."""

import json

import pytest
from click.testing import CliRunner

from recsieve.cli import cli
from recsieve.log import reset_logging


@pytest.fixture(autouse=True)
def reset_recsieve_logging():
    """Drop the handler CLI invocations install.

    The CLI binds it to the runner's stderr, which is gone once the
    invocation ends.
    """
    yield
    reset_logging()


@pytest.fixture(autouse=True)
def isolate_specs_env(monkeypatch, tmp_path):
    """Keep $RECSIEVE_SPECS and project spec files out of the tests."""
    monkeypatch.delenv("RECSIEVE_SPECS", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def cli_runner():
    """Provide Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def invoke(cli_runner):
    """Helper to invoke the CLI with args and optional input.

    Usage:
        result = invoke(["--specs", "filters.json", "apply", "-s", "name=an"], input_data=ndjson)
    """

    def _invoke(args, input_data=None):
        return cli_runner.invoke(cli, args, input=input_data)

    return _invoke


@pytest.fixture
def vets():
    """Records shaped like the clinic listing."""
    return [
        {"name": "Ana", "rating": 4, "type": "public", "city": "Madrid"},
        {"name": "Bob", "rating": 2, "type": "private", "city": "Sevilla"},
        {"name": "Juana", "rating": 5, "type": "private", "city": "Madrid"},
        {"name": "Luis", "rating": 3.5, "type": "public", "city": "Bilbao"},
    ]


@pytest.fixture
def vet_specs():
    return [
        ["name", "string", "contains"],
        ["city", "string", "exact"],
        ["rating", "numeric", "gte"],
        ["type", "selection", ["public", "private"]],
    ]


@pytest.fixture
def specs_file(tmp_path, vet_specs):
    """Write the vet filter specs to a JSON file."""
    path = tmp_path / "filters.json"
    path.write_text(json.dumps(vet_specs))
    return path


@pytest.fixture
def vets_ndjson(vets):
    return "".join(json.dumps(record) + "\n" for record in vets)
