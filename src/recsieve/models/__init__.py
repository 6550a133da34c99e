"""Pydantic models for filter declarations."""

from .errors import Error, SpecValidationError
from .specs import (
    KINDS,
    NUMERIC_MODES,
    STRING_MODES,
    FilterSpec,
    NumericFilter,
    SelectionFilter,
    StringFilter,
)

__all__ = [
    "Error",
    "FilterSpec",
    "KINDS",
    "NUMERIC_MODES",
    "NumericFilter",
    "STRING_MODES",
    "SelectionFilter",
    "SpecValidationError",
    "StringFilter",
]
