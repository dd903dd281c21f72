"""
Product filters.

``ProductFilter`` grows one method per query shape and has to be edited
for every new combination of criteria. ``BetterFilter`` takes any
specification and stays closed to modification: new criteria are new
specification classes.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Generic, Protocol, TypeVar, runtime_checkable

from .specifications.base import ensure_specification

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .domain.product import Color, Product, Size
    from .domain.specification import ISpecification

logger = logging.getLogger("ocp_catalog.filters")
_default_logger = logger

T = TypeVar("T")


@runtime_checkable
class IFilter(Protocol[T]):
    """Protocol for filters that select items with a specification."""

    def filter(self, items: Iterable[T], spec: ISpecification[T]) -> list[T]:
        ...


class ProductFilter:
    """Criteria-specific filtering. Not open-closed compliant."""

    def filter_by_color(
        self, products: Iterable[Product], color: Color
    ) -> list[Product]:
        result = [item for item in products if item.color == color]
        logger.debug("filter_by_color(%s) matched %d product(s)", color, len(result))
        return result

    def filter_by_size(self, products: Iterable[Product], size: Size) -> list[Product]:
        result = [item for item in products if item.size == size]
        logger.debug("filter_by_size(%s) matched %d product(s)", size, len(result))
        return result

    def filter_by_size_and_color(
        self,
        products: Iterable[Product],
        size: Size,
        color: Color,
    ) -> list[Product]:
        result = [
            item for item in products if item.size == size and item.color == color
        ]
        logger.debug(
            "filter_by_size_and_color(%s, %s) matched %d product(s)",
            size,
            color,
            len(result),
        )
        return result


class BetterFilter(Generic[T]):
    """Generic filter over any specification. Open-closed compliant.

    The input is never modified; the result is a new list holding the
    matching items in their original order.
    """

    def __init__(self, *, logger: logging.Logger | None = None) -> None:
        self._logger = logger or _default_logger

    def filter(self, items: Iterable[T], spec: ISpecification[T]) -> list[T]:
        ensure_specification(spec)
        result = [item for item in items if spec.is_satisfied_by(item)]
        self._logger.debug("%r matched %d item(s)", spec, len(result))
        return result
