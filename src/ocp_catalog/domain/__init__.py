"""Domain primitives: the product catalog and the specification protocol."""

from __future__ import annotations

from .product import Color, Product, Size, sample_catalog
from .specification import ISpecification

__all__: list[str] = [
    "Color",
    "ISpecification",
    "Product",
    "Size",
    "sample_catalog",
]
