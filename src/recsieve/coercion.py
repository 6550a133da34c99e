"""Value coercion for textual filter input and record fields."""

import math
import numbers
from collections.abc import Mapping
from decimal import Decimal
from typing import Any, Optional, Union

Number = Union[numbers.Real, Decimal]

MISSING = object()


def read_field(record: Any, field: str) -> Any:
    """Read ``field`` from a record.

    Mappings are read by key, anything else by attribute. Returns
    ``MISSING`` when the record has no such field or holds ``None`` there.
    """
    if isinstance(record, Mapping):
        value = record.get(field, MISSING)
    else:
        value = getattr(record, field, MISSING)
    return MISSING if value is None else value


def to_text(value: Any) -> str:
    """Render a field value as text.

    Examples:
        >>> to_text(True)
        'true'
        >>> to_text(4.0)
        '4'
        >>> to_text("Ana")
        'Ana'
    """
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def parse_number(value: Any) -> Optional[Number]:
    """Parse a textual number.

    Integers stay integers, everything else that parses becomes a float.
    Numbers already held by a record (int, float, Decimal, Fraction, numpy
    scalars) are returned as they are.
    Returns None for input that is not a finite-or-infinite number
    (NaN is rejected).

    Examples:
        >>> parse_number("3")
        3
        >>> parse_number(" 2.5 ")
        2.5
        >>> parse_number("not-a-number") is None
        True
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, Decimal):
        return None if value.is_nan() else value
    if isinstance(value, numbers.Real):
        return None if math.isnan(value) else value
    if not isinstance(value, str):
        return None

    text = value.strip()
    if not text:
        return None

    try:
        return int(text)
    except ValueError:
        pass

    try:
        number = float(text)
    except ValueError:
        return None

    if math.isnan(number):
        return None
    return number


def field_number(value: Any) -> Optional[Number]:
    """Numeric view of a record field, or None when it has none."""
    if value is MISSING:
        return None
    return parse_number(value)
