"""
Catalog exception hierarchy with fuzzy-match suggestions.

All specification errors inherit from ``SpecificationError`` and provide
``to_dict()`` for structured error reporting.
"""

from __future__ import annotations

from difflib import get_close_matches
from typing import Any


class CatalogError(Exception):
    """Root exception for the catalog toolkit."""


class SpecificationError(CatalogError):
    """Base exception for all specification errors."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": str(self),
        }


class InvalidCriterionError(SpecificationError, ValueError):
    """
    A criterion value is not a member of its enumeration.

    Provides fuzzy-matched suggestions for likely intended values.
    """

    def __init__(self, attr: str, value: Any, valid_values: list[str]) -> None:
        self.attr = attr
        self.value = value
        self.valid_values = valid_values
        self.suggestions = get_close_matches(
            str(value).lower(), valid_values, n=3, cutoff=0.6
        )

        message = f"Invalid {attr}: {value!r}."
        if self.suggestions:
            message += f" Did you mean: {', '.join(self.suggestions)}?"
        message += f" Valid values: {', '.join(valid_values)}"
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "INVALID_CRITERION",
            "attr": self.attr,
            "value": self.value,
            "suggestions": self.suggestions,
            "valid_values": list(self.valid_values),
        }


class EmptyCompositeError(SpecificationError, ValueError):
    """A composite specification was built without any operand."""

    def __init__(self, composite: str) -> None:
        self.composite = composite
        super().__init__(f"{composite} requires at least one specification")


class NotASpecificationError(SpecificationError, TypeError):
    """An object that does not implement the specification protocol was used."""

    def __init__(self, obj: object) -> None:
        self.type_name = type(obj).__name__
        super().__init__(
            "Expected a specification with is_satisfied_by() and to_dict(), "
            f"got {self.type_name}"
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "NOT_A_SPECIFICATION",
            "type": self.type_name,
        }
