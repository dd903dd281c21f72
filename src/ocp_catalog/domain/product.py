"""Catalog records: products with a color and a size."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class Color(str, Enum):
    """Closed set of product colors."""

    RED = "red"
    GREEN = "green"
    BLUE = "blue"


class Size(str, Enum):
    """Closed set of product sizes."""

    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
    HUGE = "huge"


class Product(BaseModel):
    """A catalog item.

    Immutable; equality and hashing are structural.

    Usage::

        apple = Product(name="apple", color=Color.RED, size=Size.SMALL)
        iris = Product(name="iris", color="blue", size="small")
    """

    model_config = ConfigDict(frozen=True)

    name: str
    color: Color
    size: Size

    def __str__(self) -> str:
        return self.name


def sample_catalog() -> list[Product]:
    """The four-product catalog used by the demo and the tests."""
    return [
        Product(name="apple", color=Color.RED, size=Size.SMALL),
        Product(name="watermelon", color=Color.GREEN, size=Size.MEDIUM),
        Product(name="ferrari", color=Color.RED, size=Size.LARGE),
        Product(name="iris", color=Color.BLUE, size=Size.SMALL),
    ]
