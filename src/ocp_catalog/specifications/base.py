from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

from ..domain.specification import ISpecification
from ..exceptions import EmptyCompositeError, NotASpecificationError

T = TypeVar("T", contravariant=True)


def ensure_specification(obj: object) -> None:
    """Raise :class:`NotASpecificationError` unless *obj* is a specification."""
    if not isinstance(obj, ISpecification):
        raise NotASpecificationError(obj)


class BaseSpecification(ABC, Generic[T]):
    """Base class for specifications with logic operator support."""

    @abstractmethod
    def is_satisfied_by(self, candidate: T) -> bool:
        ...

    @abstractmethod
    def to_dict(self) -> dict[str, Any]:
        ...

    def __and__(self, other: ISpecification[T]) -> AndSpecification[T]:
        ensure_specification(other)
        # Chained `&` builds one flat AND instead of nested pairs.
        left = self.specifications if isinstance(self, AndSpecification) else (self,)
        right = (
            other.specifications if isinstance(other, AndSpecification) else (other,)
        )
        return AndSpecification(*left, *right)

    def merge(self, other: ISpecification[T]) -> AndSpecification[T]:
        """Merge with another specification using logical AND."""
        return self & other

    # -- value semantics -----------------------------------------------------

    @abstractmethod
    def _key(self) -> tuple[Any, ...]:
        """Fields that define equality between two specifications."""
        ...

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash((type(self), self._key()))


class AndSpecification(BaseSpecification[T]):
    """Logical AND composite specification.

    Takes any number of operands; nested composites are allowed.
    """

    def __init__(self, *specifications: ISpecification[T]) -> None:
        if not specifications:
            raise EmptyCompositeError(type(self).__name__)
        for spec in specifications:
            ensure_specification(spec)
        self.specifications = specifications

    def is_satisfied_by(self, candidate: T) -> bool:
        return all(spec.is_satisfied_by(candidate) for spec in self.specifications)

    def to_dict(self) -> dict[str, Any]:
        return {
            "op": "and",
            "conditions": [spec.to_dict() for spec in self.specifications],
        }

    def _key(self) -> tuple[Any, ...]:
        return tuple(self.specifications)

    def __repr__(self) -> str:
        inner = ", ".join(repr(spec) for spec in self.specifications)
        return f"{type(self).__name__}({inner})"
