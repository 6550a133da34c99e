"""Filter spec models.

A filter spec is a tagged union over ``kind``:

- ``string``:    ``mode`` is one of contains, regex, exact
- ``numeric``:   ``mode`` is one of eq, gt, gte, lt, lte
- ``selection``: ``options`` is the ordered list of allowed literals
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictFloat, StrictInt, StrictStr

StringMode = Literal["contains", "regex", "exact"]
NumericMode = Literal["eq", "gt", "gte", "lt", "lte"]

# strict so True is never read as 1 and "1" never as 1
OptionValue = Union[StrictBool, StrictInt, StrictFloat, StrictStr]

STRING_MODES = ("contains", "regex", "exact")
NUMERIC_MODES = ("eq", "gt", "gte", "lt", "lte")
KINDS = ("string", "numeric", "selection")


class _Spec(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    field: str = Field(min_length=1)


class StringFilter(_Spec):
    """Text match against the field's text form."""

    kind: Literal["string"] = "string"
    mode: StringMode


class NumericFilter(_Spec):
    """Numeric comparison against the field's numeric value."""

    kind: Literal["numeric"] = "numeric"
    mode: NumericMode


class SelectionFilter(_Spec):
    """Equality against one of a fixed set of options.

    The options only feed the caller's choice list; the predicate itself
    compares against whichever value is active.
    """

    kind: Literal["selection"] = "selection"
    options: tuple[OptionValue, ...] = ()


FilterSpec = Annotated[
    Union[StringFilter, NumericFilter, SelectionFilter],
    Field(discriminator="kind"),
]


__all__ = [
    "FilterSpec",
    "KINDS",
    "NUMERIC_MODES",
    "NumericFilter",
    "NumericMode",
    "OptionValue",
    "STRING_MODES",
    "SelectionFilter",
    "StringFilter",
    "StringMode",
]
