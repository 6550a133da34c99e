"""recsieve - declarative filters over in-memory record collections."""

from .engine import apply, build_predicate, is_active
from .labels import choices, describe
from .models import (
    FilterSpec,
    NumericFilter,
    SelectionFilter,
    SpecValidationError,
    StringFilter,
)
from .registry import parse_spec, validate
from .state import ActiveValues

__all__ = [
    "ActiveValues",
    "FilterSpec",
    "NumericFilter",
    "SelectionFilter",
    "SpecValidationError",
    "StringFilter",
    "apply",
    "build_predicate",
    "choices",
    "describe",
    "is_active",
    "parse_spec",
    "validate",
]
