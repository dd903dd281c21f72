from .attributes import AttributeSpecification, ColorSpecification, SizeSpecification
from .base import AndSpecification, BaseSpecification, ensure_specification

__all__ = [
    "BaseSpecification",
    "AndSpecification",
    "AttributeSpecification",
    "ColorSpecification",
    "SizeSpecification",
    "ensure_specification",
]
