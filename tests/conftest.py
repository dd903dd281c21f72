"""Shared fixtures for catalog tests."""

from __future__ import annotations

import pytest

from ocp_catalog.domain import Product, sample_catalog
from ocp_catalog.filters import BetterFilter, ProductFilter


@pytest.fixture
def catalog() -> list[Product]:
    """apple, watermelon, ferrari and iris, in that order."""
    return sample_catalog()


@pytest.fixture
def better_filter() -> BetterFilter[Product]:
    return BetterFilter()


@pytest.fixture
def product_filter() -> ProductFilter:
    return ProductFilter()
