"""Demo: naive filtering vs. specification-based filtering."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .domain.product import Color, Size, sample_catalog
from .filters import BetterFilter, ProductFilter
from .specifications import AndSpecification, ColorSpecification, SizeSpecification

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from .domain.product import Product

logger = logging.getLogger("ocp_catalog.demo")


def run_demo(products: Sequence[Product]) -> list[str]:
    """Run the illustrative queries with both filters and return the output lines."""
    lines: list[str] = []

    # ─── Not open-closed compliant ────────────────────────────────
    lines.append("Result of Bad Code: Not open-closed compliant:")
    pf = ProductFilter()

    for item in pf.filter_by_color(products, Color.RED):
        lines.append(f"Red item: {item.name}")
    for item in pf.filter_by_size(products, Size.SMALL):
        lines.append(f"Small item: {item.name}")
    for item in pf.filter_by_size_and_color(products, Size.SMALL, Color.RED):
        lines.append(f"Small and Red item: {item.name}")

    # ─── Open-closed compliant ────────────────────────────────────
    lines.append("Result of Better Code: open-closed compliant")
    bf: BetterFilter[Product] = BetterFilter()

    for item in bf.filter(products, ColorSpecification(Color.RED)):
        lines.append(f"Better Red Items: {item.name}")
    for item in bf.filter(products, SizeSpecification(Size.SMALL)):
        lines.append(f"Better Small Items: {item.name}")
    small_and_red = AndSpecification(
        SizeSpecification(Size.SMALL), ColorSpecification(Color.RED)
    )
    for item in bf.filter(products, small_and_red):
        lines.append(f"Better Small and Red Items: {item.name}")

    return lines


def main(
    products: Sequence[Product] | None = None,
    echo: Callable[[str], object] = print,
) -> int:
    """Print the demo for *products* (the sample catalog by default)."""
    if products is None:
        products = sample_catalog()
    logger.info("Running demo over %d product(s)", len(products))
    for line in run_demo(products):
        if line.startswith("Result of"):
            echo(f"\n\n{line}\n")
        else:
            echo(line)
    return 0


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    raise SystemExit(main())
