"""Predicate evaluation engine.

``apply`` narrows a collection by every active filter in turn (logical AND).
A filter is active when the caller supplied a value for its field that is
neither ``""`` nor ``"all"``.

Malformed runtime values never abort evaluation: an invalid regex or a
non-numeric value for a numeric filter leaves that filter inactive for the
pass. A record without the filtered field does not match.
"""

import operator
import re
from collections.abc import Callable, Iterable, Mapping
from typing import Any, Dict, List, Optional

from .coercion import MISSING, field_number, parse_number, read_field, to_text
from .log import get_logger
from .models.specs import FilterSpec, NumericFilter, SelectionFilter, StringFilter
from .registry import is_validated, validate

logger = get_logger(__name__)

INACTIVE_VALUES = ("", "all")

Predicate = Callable[[Any], bool]

_COMPARATORS: Dict[str, Callable[[Any, Any], bool]] = {
    "eq": operator.eq,
    "gt": operator.gt,
    "gte": operator.ge,
    "lt": operator.lt,
    "lte": operator.le,
}


def is_active(active: Mapping[str, Any], field: str) -> bool:
    """Whether ``field`` carries a value that constrains the result."""
    if field not in active:
        return False
    value = active[field]
    if value is None:
        return False
    return not (isinstance(value, str) and value in INACTIVE_VALUES)


def _string_predicate(spec: StringFilter, value: Any) -> Optional[Predicate]:
    needle = to_text(value)

    if spec.mode == "contains":
        needle = needle.lower()

        def contains(record: Any) -> bool:
            target = read_field(record, spec.field)
            return target is not MISSING and needle in to_text(target).lower()

        return contains

    if spec.mode == "regex":
        try:
            pattern = re.compile(needle)
        except (re.error, OverflowError, RecursionError) as e:
            logger.debug(
                "filter_skipped", field=spec.field, reason="invalid_regex", error=str(e)
            )
            return None

        def matches(record: Any) -> bool:
            target = read_field(record, spec.field)
            return target is not MISSING and pattern.search(to_text(target)) is not None

        return matches

    def exact(record: Any) -> bool:
        target = read_field(record, spec.field)
        return target is not MISSING and to_text(target) == needle

    return exact


def _numeric_predicate(spec: NumericFilter, value: Any) -> Optional[Predicate]:
    number = parse_number(value)
    if number is None:
        logger.debug(
            "filter_skipped", field=spec.field, reason="not_a_number", value=value
        )
        return None

    compare = _COMPARATORS[spec.mode]

    def numeric(record: Any) -> bool:
        target = field_number(read_field(record, spec.field))
        return target is not None and compare(target, number)

    return numeric


def _selection_predicate(spec: SelectionFilter, value: Any) -> Optional[Predicate]:
    def selected(record: Any) -> bool:
        target = read_field(record, spec.field)
        if target is MISSING:
            return False
        if isinstance(value, str):
            # options like 2024 arrive as "2024" from text capture
            return to_text(target) == value
        if isinstance(target, bool) or isinstance(value, bool):
            return target is value
        return target == value

    return selected


_PREDICATE_BUILDERS: Dict[str, Callable[[Any, Any], Optional[Predicate]]] = {
    "string": _string_predicate,
    "numeric": _numeric_predicate,
    "selection": _selection_predicate,
}


def build_predicate(spec: FilterSpec, value: Any) -> Optional[Predicate]:
    """Build the record predicate for one spec and its active value.

    Returns None when the value cannot be used (the filter is then inactive).
    """
    return _PREDICATE_BUILDERS[spec.kind](spec, value)


def apply(
    collection: Iterable[Any],
    specs: Iterable[Any],
    active: Mapping[str, Any],
) -> List[Any]:
    """Return the records of ``collection`` matching every active filter.

    Args:
        collection: Records to filter; never mutated
        specs: Validated filter specs (raw declarations are validated first)
        active: Mapping of field name to the caller's raw value

    Returns:
        New list preserving the input order of the surviving records

    Raises:
        SpecValidationError: If ``specs`` holds raw declarations that are invalid

    Examples:
        >>> records = [{"name": "Ana", "rating": 4}, {"name": "Bob", "rating": 2}]
        >>> apply(records, [("rating", "numeric", "gte")], {"rating": "3"})
        [{'name': 'Ana', 'rating': 4}]
    """
    if not (isinstance(specs, (list, tuple)) and is_validated(specs)):
        specs = validate(specs)

    result = list(collection)
    for spec in specs:
        if not is_active(active, spec.field):
            continue
        predicate = build_predicate(spec, active[spec.field])
        if predicate is None:
            continue
        result = [record for record in result if predicate(record)]
    return result


__all__ = ["INACTIVE_VALUES", "apply", "build_predicate", "is_active"]
