"""Single-attribute specifications: equality on one field of the candidate."""

from __future__ import annotations

from enum import Enum
from typing import Any, TypeVar

from ..domain.product import Color, Product, Size
from ..exceptions import InvalidCriterionError
from .base import BaseSpecification

T = TypeVar("T", contravariant=True)
E = TypeVar("E", bound=Enum)

_MISSING = object()


class AttributeSpecification(BaseSpecification[T]):
    """
    Satisfied when ``candidate.<attr>`` equals the target value.

    Subclasses bind ``attr`` to a concrete field; new query dimensions
    are added by subclassing, never by editing the filters.
    """

    def __init__(self, attr: str, value: Any) -> None:
        self.attr = attr
        self.value = value

    def is_satisfied_by(self, candidate: T) -> bool:
        return bool(getattr(candidate, self.attr, _MISSING) == self.value)

    def to_dict(self) -> dict[str, Any]:
        value = self.value.value if isinstance(self.value, Enum) else self.value
        return {"op": "=", "attr": self.attr, "val": value}

    def _key(self) -> tuple[Any, ...]:
        return (self.attr, self.value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.attr}={self.value!r})"


def _coerce(enum_type: type[E], attr: str, value: E | str) -> E:
    if isinstance(value, enum_type):
        return value
    try:
        return enum_type(value)
    except ValueError:
        raise InvalidCriterionError(
            attr, value, [member.value for member in enum_type]
        ) from None


class ColorSpecification(AttributeSpecification[Product]):
    """Satisfied iff the product has the given color."""

    def __init__(self, color: Color | str) -> None:
        super().__init__("color", _coerce(Color, "color", color))

    @property
    def color(self) -> Color:
        return self.value  # type: ignore[no-any-return]

    def __repr__(self) -> str:
        return f"ColorSpecification({self.color.value!r})"


class SizeSpecification(AttributeSpecification[Product]):
    """Satisfied iff the product has the given size."""

    def __init__(self, size: Size | str) -> None:
        super().__init__("size", _coerce(Size, "size", size))

    @property
    def size(self) -> Size:
        return self.value  # type: ignore[no-any-return]

    def __repr__(self) -> str:
        return f"SizeSpecification({self.size.value!r})"
