"""Result and error models used across the filter engine."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel


class SpecValidationError(ValueError):
    """A filter declaration uses an unknown kind, mode or option list."""

    def __init__(self, reason: str, declaration: Any = None):
        self.reason = reason
        self.declaration = declaration
        if declaration is None:
            super().__init__(reason)
        else:
            super().__init__(f"{reason}: {declaration!r}")


class Error(BaseModel):
    """Error result from operations."""

    message: str

    def __str__(self) -> str:
        return self.message


__all__ = ["Error", "SpecValidationError"]
