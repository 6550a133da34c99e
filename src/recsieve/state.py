"""Incremental active-value state, updated one field at a time."""

from collections.abc import Iterator, Mapping
from typing import Any, Dict, List, Optional

from .coercion import to_text
from .engine import is_active


class ActiveValues(Mapping):
    """Caller-owned mapping of field name to the current raw value.

    Values are stored as text, the way they are captured. Pass an instance
    straight to ``apply`` as its ``active`` argument.

    Example:
        >>> values = ActiveValues()
        >>> values.set("name", "an")
        >>> values.set("type", "all")
        >>> values.active_fields()
        ['name']
    """

    def __init__(self, initial: Optional[Mapping[str, Any]] = None):
        self._values: Dict[str, str] = {}
        for field, value in (initial or {}).items():
            self.set(field, value)

    def __getitem__(self, field: str) -> str:
        return self._values[field]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"ActiveValues({self._values!r})"

    def set(self, field: str, value: Any) -> None:
        """Store the raw value for ``field``; None clears it."""
        if value is None:
            self.clear(field)
            return
        self._values[field] = to_text(value)

    def clear(self, field: str) -> None:
        self._values.pop(field, None)

    def reset(self) -> None:
        self._values.clear()

    def is_active(self, field: str) -> bool:
        return is_active(self._values, field)

    def active_fields(self) -> List[str]:
        """Fields whose value constrains the result, in insertion order."""
        return [field for field in self._values if self.is_active(field)]


__all__ = ["ActiveValues"]
