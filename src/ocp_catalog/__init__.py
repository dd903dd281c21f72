"""ocp-catalog — Open-Closed Principle illustrated with the Specification pattern.

A tiny product catalog filtered two ways: a criteria-per-method
``ProductFilter`` and a generic ``BetterFilter`` driven by composable
specifications.
"""

from __future__ import annotations

from .domain import Color, ISpecification, Product, Size, sample_catalog
from .exceptions import (
    CatalogError,
    EmptyCompositeError,
    InvalidCriterionError,
    NotASpecificationError,
    SpecificationError,
)
from .filters import BetterFilter, IFilter, ProductFilter
from .specifications import (
    AndSpecification,
    AttributeSpecification,
    BaseSpecification,
    ColorSpecification,
    SizeSpecification,
)

__all__ = [
    # Domain
    "Color",
    "Size",
    "Product",
    "sample_catalog",
    # Specifications
    "ISpecification",
    "BaseSpecification",
    "AttributeSpecification",
    "ColorSpecification",
    "SizeSpecification",
    "AndSpecification",
    # Filters
    "IFilter",
    "ProductFilter",
    "BetterFilter",
    # Exceptions
    "CatalogError",
    "SpecificationError",
    "InvalidCriterionError",
    "EmptyCompositeError",
    "NotASpecificationError",
]
