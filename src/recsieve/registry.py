"""Filter spec registry: normalize and validate filter declarations.

A declaration is any of:

- a positional triple ``(field, kind, mode)``; for selection the third
  element is the option list, e.g. ``("type", "selection", ["public", "private"])``
- a mapping ``{"field": ..., "kind": ..., "mode": ...}``; selection may use
  ``"options"`` in place of ``"mode"``
- an already-built ``StringFilter`` / ``NumericFilter`` / ``SelectionFilter``
"""

from collections.abc import Iterable, Mapping, Sequence
from typing import Any, List

from pydantic import TypeAdapter, ValidationError

from .log import get_logger
from .models.errors import SpecValidationError
from .models.specs import (
    KINDS,
    NUMERIC_MODES,
    STRING_MODES,
    FilterSpec,
    NumericFilter,
    SelectionFilter,
    StringFilter,
)

logger = get_logger(__name__)

_SPEC_ADAPTER = TypeAdapter(FilterSpec)
_SPEC_TYPES = (StringFilter, NumericFilter, SelectionFilter)
_MODES = {"string": STRING_MODES, "numeric": NUMERIC_MODES}


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


def _as_mapping(declaration: Any) -> dict:
    """Bring a triple or mapping declaration into keyword form."""
    if isinstance(declaration, Mapping):
        data = dict(declaration)
    elif _is_sequence(declaration):
        if len(declaration) != 3:
            raise SpecValidationError(
                "declaration must have exactly three elements (field, kind, mode)",
                declaration,
            )
        field, kind, mode = declaration
        data = {"field": field, "kind": kind, "mode": mode}
    else:
        raise SpecValidationError("unsupported declaration type", declaration)

    kind = data.get("kind")
    if kind not in KINDS:
        raise SpecValidationError(f"unknown filter kind {kind!r}", declaration)

    if kind == "selection":
        if "mode" in data:
            if "options" in data:
                raise SpecValidationError(
                    "selection declares both mode and options", declaration
                )
            data["options"] = data.pop("mode")
        options = data.get("options", ())
        if not _is_sequence(options):
            raise SpecValidationError(
                "selection options must be a sequence of literal values", declaration
            )
        data["options"] = tuple(options)
    elif data.get("mode") not in _MODES[kind]:
        raise SpecValidationError(
            f"unknown {kind} mode {data.get('mode')!r}, "
            f"expected one of {', '.join(_MODES[kind])}",
            declaration,
        )

    return data


def parse_spec(declaration: Any) -> FilterSpec:
    """Normalize one declaration into a filter spec model.

    Args:
        declaration: Triple, mapping or spec model

    Returns:
        Validated filter spec

    Raises:
        SpecValidationError: If the kind, mode, options or field are malformed

    Examples:
        >>> parse_spec(("name", "string", "contains"))
        StringFilter(field='name', kind='string', mode='contains')
    """
    if isinstance(declaration, _SPEC_TYPES):
        return declaration

    data = _as_mapping(declaration)
    try:
        return _SPEC_ADAPTER.validate_python(data)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc']) or 'spec'}: {err['msg']}"
            for err in e.errors()
        )
        raise SpecValidationError(problems, declaration) from e


def validate(specs: Iterable[Any], strict: bool = True) -> List[FilterSpec]:
    """Validate a list of filter declarations.

    Args:
        specs: Declarations in any accepted form
        strict: Raise on the first invalid declaration (default). When
            False, invalid declarations are dropped and logged instead.

    Returns:
        Validated specs in declaration order

    Raises:
        SpecValidationError: On an invalid declaration in strict mode
    """
    if isinstance(specs, (str, bytes, Mapping)) or not isinstance(specs, Iterable):
        raise SpecValidationError("filter declarations must be a list", specs)

    valid: List[FilterSpec] = []
    for index, declaration in enumerate(specs):
        try:
            valid.append(parse_spec(declaration))
        except SpecValidationError as e:
            if strict:
                raise
            logger.warning("spec_dropped", index=index, reason=e.reason)
    return valid


def is_validated(specs: Sequence[Any]) -> bool:
    """True when every entry is already a spec model."""
    return all(isinstance(spec, _SPEC_TYPES) for spec in specs)


__all__ = ["is_validated", "parse_spec", "validate"]
