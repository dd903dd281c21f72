"""Specification pattern primitives."""

from typing import Any, Protocol, TypeVar, runtime_checkable

T = TypeVar("T", contravariant=True)


@runtime_checkable
class ISpecification(Protocol[T]):
    """
    Protocol for the Specification pattern.
    Encapsulates a business rule that a candidate either satisfies or not.
    """

    def is_satisfied_by(self, candidate: T) -> bool:
        """Check whether *candidate* meets the rule."""
        ...

    def to_dict(self) -> dict[str, Any]:
        """
        Return a dictionary representation of the specification.
        Useful for logging and for describing composite rules.
        """
        ...
