"""Caller-facing labels and choice lists for filter specs."""

from typing import Any, List, Tuple

from .coercion import to_text
from .models.specs import FilterSpec

ALL_CHOICE = "all"

_STRING_LABELS = {
    "contains": "substring",
    "regex": "regular expression",
    "exact": "exact match",
}

_NUMERIC_LABELS = {
    "eq": "equal to",
    "gt": "greater than",
    "gte": "greater than or equal to",
    "lt": "less than",
    "lte": "less than or equal to",
}


def describe(spec: FilterSpec) -> str:
    """Human label for a filter.

    Examples:
        >>> describe(StringFilter(field="name", mode="contains"))
        'Filter name by substring'
        >>> describe(NumericFilter(field="rating", mode="gte"))
        'Filter rating greater than or equal to'
    """
    if spec.kind == "string":
        return f"Filter {spec.field} by {_STRING_LABELS[spec.mode]}"
    if spec.kind == "numeric":
        return f"Filter {spec.field} {_NUMERIC_LABELS[spec.mode]}"
    return f"Filter {spec.field} by option"


def choices(spec: FilterSpec) -> List[Tuple[str, Any]]:
    """Choice list for a selection filter, led by the "all" entry.

    Non-selection filters have no choices.
    """
    if spec.kind != "selection":
        return []
    return [(f"All {spec.field}", ALL_CHOICE)] + [
        (to_text(option), option) for option in spec.options
    ]


__all__ = ["ALL_CHOICE", "choices", "describe"]
