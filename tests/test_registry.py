"""Tests for filter declaration validation."""

import pytest
from pydantic import ValidationError

from recsieve import (
    NumericFilter,
    SelectionFilter,
    SpecValidationError,
    StringFilter,
    parse_spec,
    validate,
)


def test_parse_triples():
    assert parse_spec(("name", "string", "contains")) == StringFilter(
        field="name", mode="contains"
    )
    assert parse_spec(["rating", "numeric", "lte"]) == NumericFilter(
        field="rating", mode="lte"
    )


def test_parse_selection_triple_keeps_option_order():
    spec = parse_spec(("type", "selection", ["public", "private", 3]))
    assert isinstance(spec, SelectionFilter)
    assert spec.options == ("public", "private", 3)


def test_parse_mapping_forms():
    assert parse_spec({"field": "name", "kind": "string", "mode": "regex"}).mode == "regex"
    spec = parse_spec({"field": "type", "kind": "selection", "options": ["a", "b"]})
    assert spec.options == ("a", "b")


def test_parse_passes_models_through():
    spec = StringFilter(field="name", mode="exact")
    assert parse_spec(spec) is spec


def test_options_keep_literal_types():
    spec = parse_spec(("flag", "selection", [True, 1, 1.5, "x"]))
    assert spec.options == (True, 1, 1.5, "x")
    assert type(spec.options[0]) is bool
    assert type(spec.options[1]) is int


@pytest.mark.parametrize(
    "declaration",
    [
        ("name", "text", "contains"),
        ("name", "string", "startswith"),
        ("rating", "numeric", "ne"),
        ("rating", "numeric", "contains"),
        ("name", "string", "gt"),
        ("type", "selection", "public"),
        ("type", "selection", [{"a": 1}]),
        ("type", "selection", [None]),
        ("", "string", "contains"),
        (5, "string", "contains"),
        ("name", "string"),
        "name",
        42,
    ],
)
def test_invalid_declarations_rejected(declaration):
    with pytest.raises(SpecValidationError):
        parse_spec(declaration)


def test_error_carries_declaration():
    with pytest.raises(SpecValidationError) as excinfo:
        parse_spec(("name", "string", "fuzzy"))
    assert excinfo.value.declaration == ("name", "string", "fuzzy")
    assert "fuzzy" in str(excinfo.value)


def test_validate_strict_raises_on_first_invalid():
    with pytest.raises(SpecValidationError):
        validate([("name", "string", "contains"), ("rating", "numeric", "approx")])


def test_validate_lenient_drops_invalid():
    specs = validate(
        [
            ("name", "string", "contains"),
            ("rating", "numeric", "approx"),
            ("type", "selection", ["public"]),
        ],
        strict=False,
    )
    assert [spec.field for spec in specs] == ["name", "type"]


def test_validate_keeps_declaration_order():
    specs = validate(
        [("b", "numeric", "gt"), ("a", "string", "exact"), ("c", "selection", [])]
    )
    assert [spec.kind for spec in specs] == ["numeric", "string", "selection"]


def test_validate_rejects_non_list():
    with pytest.raises(SpecValidationError):
        validate("name,string,contains")
    with pytest.raises(SpecValidationError):
        validate({"field": "name", "kind": "string", "mode": "exact"})


def test_specs_are_frozen():
    spec = parse_spec(("name", "string", "contains"))
    with pytest.raises(ValidationError):
        spec.mode = "regex"
